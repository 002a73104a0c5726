# frontend/run.py
# Entry point for the review portal when running from a checkout.

import sys
import os


def main():
    """
    Puts frontend/ and backend/ on the import path so the packages resolve, then launches the portal.
    """
    project_root = os.path.dirname(os.path.abspath(__file__))
    sys.path.insert(0, project_root)
    # portal shares the relay's logging helpers
    sys.path.insert(1, os.path.join(os.path.dirname(project_root), "backend"))

    print("Initializing DesignFlow review portal...")

    from portal.main import main as run_portal
    run_portal()


if __name__ == "__main__":
    main()
