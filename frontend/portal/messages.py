# frontend/portal/messages.py
# User-facing strings. Dispatch logic only ever sees NotificationAction values.

from .models import NotificationAction

CATALOGUES = {
    "en": {
        "action.created": "new delivery",
        "action.approved": "approved",
        "action.rejected": "requested changes on",
        "log.created": "📧 Sending to {client} with a copy to {admin}: new delivery \"{title}\"",
        "log.status": "📧 Notice to {admin}: client {client} {action} \"{title}\"",
        "log.sent": "✅ Mail relayed for \"{title}\"",
        "log.failed": "⚠️ Relay unreachable for \"{title}\"",
        "description.fallback": "Action: {action}",
        "feedback.approved_default": "Approved",
    },
    "es": {
        "action.created": "nueva entrega",
        "action.approved": "aprobado",
        "action.rejected": "rechazado",
        "log.created": "📧 Enviando a {client} y copia a {admin}: nueva entrega \"{title}\"",
        "log.status": "📧 Aviso a {admin}: el cliente {client} ha {action} \"{title}\"",
        "log.sent": "✅ Correo real enviado para \"{title}\"",
        "log.failed": "⚠️ Error de conexión con el servidor de correo para \"{title}\"",
        "description.fallback": "Acción: {action}",
        "feedback.approved_default": "Aprobado",
    },
}


def text(key: str, locale: str = "en", **kwargs) -> str:
    catalogue = CATALOGUES.get(locale, CATALOGUES["en"])
    template = catalogue.get(key, CATALOGUES["en"][key])
    return template.format(**kwargs)


def action_label(action: NotificationAction, locale: str = "en") -> str:
    return text(f"action.{NotificationAction(action).value}", locale)
