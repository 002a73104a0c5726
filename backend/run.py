import uvicorn
import os
import sys
import argparse

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="DesignFlow mail relay launcher")
    parser.add_argument("--port", type=int, default=8421, help="Port to run the relay on (default: 8421)")
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Interface to bind (default: 0.0.0.0)")
    args = parser.parse_args()

    # Makes the relay package importable when run from a checkout.
    backend_dir = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, backend_dir)

    from relay.main import app
    print(f"DesignFlow relay starting on port {args.port} ...")
    print(f"API docs: http://127.0.0.1:{args.port}/docs")

    uvicorn.run(app, host=args.host, port=args.port)
