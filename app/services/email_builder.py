"""HTML email building for applications and contact messages."""

import base64

from app.schemas.email import EmailAttachment, OutboundEmail
from app.schemas.submission import ApplicationSubmission, ContactSubmission
from app.utils.sanitizer import escape_html

EMAIL_FROM = "Mantagua Gastronomía <onboarding@resend.dev>"
BUSINESS_NAME = "Mantagua Gastronomía"
HR_CONTACT_ADDRESS = "recursos@mantagua.com"

CONFIRMATION_SUBJECT = f"✅ Candidatura Recibida - {BUSINESS_NAME}"

_BASE_STYLE = """
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; background: #f9f9f9; border-radius: 8px; overflow: hidden; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
    .header { background: linear-gradient(135deg, #D4AF37 0%, #B8941F 100%); color: white; padding: 40px 20px; text-align: center; }
    .header h1 { margin: 0; font-size: 28px; font-weight: bold; }
    .header p { margin: 8px 0 0 0; font-size: 14px; opacity: 0.9; }
    .content { padding: 40px 30px; background: white; }
    .field { margin-bottom: 24px; }
    .field-label { font-weight: 600; color: #D4AF37; font-size: 12px; text-transform: uppercase; letter-spacing: 1px; margin-bottom: 6px; }
    .field-value { color: #333; font-size: 15px; line-height: 1.6; }
    .footer { background: #f5f5f5; padding: 20px 30px; font-size: 12px; color: #666; text-align: center; border-top: 1px solid #e0e0e0; }
    .footer a { color: #D4AF37; text-decoration: none; }
    a { color: #D4AF37; text-decoration: none; }
    strong { color: #222; }
"""

_APPLICATION_STYLE = (
    _BASE_STYLE
    + """
    .cv-section { margin-top: 30px; border-top: 2px solid #f0f0f0; background: #f9f9f9; padding: 20px; border-radius: 4px; border-left: 4px solid #D4AF37; }
    .cv-note { color: #666; font-size: 13px; margin-top: 10px; }
    .cover-letter { background: #f9f9f9; padding: 15px; border-radius: 4px; color: #333; font-size: 14px; white-space: pre-wrap; word-wrap: break-word; line-height: 1.6; }
"""
)

_CONTACT_STYLE = (
    _BASE_STYLE
    + """
    .message-section { margin-top: 30px; padding-top: 30px; border-top: 2px solid #f0f0f0; }
    .message-content { background: #f9f9f9; padding: 20px; border-left: 4px solid #D4AF37; border-radius: 4px; color: #333; font-size: 14px; white-space: pre-wrap; word-wrap: break-word; line-height: 1.7; }
"""
)


def _document(style: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"  <style>{style}  </style>\n"
        "</head>\n"
        "<body>\n"
        f'  <div class="container">\n{body}  </div>\n'
        "</body>\n"
        "</html>\n"
    )


def _field(label: str, value_html: str) -> str:
    return (
        '      <div class="field">\n'
        f'        <div class="field-label">{label}</div>\n'
        f'        <div class="field-value">{value_html}</div>\n'
        "      </div>\n"
    )


def _mailto(email: str) -> str:
    safe = escape_html(email)
    return f'<a href="mailto:{safe}">{safe}</a>'


def _tel(phone: str) -> str:
    safe = escape_html(phone)
    return f'<a href="tel:{safe}">{safe}</a>'


def format_size_kb(size_bytes: int) -> str:
    """Format a byte count as kilobytes with two decimals."""
    return f"{size_bytes / 1024:.2f}"


def build_application_notification(
    submission: ApplicationSubmission, recipient: str
) -> OutboundEmail:
    """Build the hiring-inbox email with the résumé attached."""
    resume = submission.resume
    if resume is None:
        raise ValueError("Application notification requires a résumé")

    name = escape_html(submission.full_name)

    cover_letter = ""
    if submission.cover_message:
        cover_letter = (
            '      <div class="field">\n'
            '        <div class="field-label">💬 Carta de Presentación</div>\n'
            f'        <div class="cover-letter">{escape_html(submission.cover_message)}</div>\n'
            "      </div>\n"
        )

    body = (
        '    <div class="header">\n'
        "      <h1>🚀 Nueva Candidatura Recibida</h1>\n"
        f"      <p>Solicitud de empleo - {BUSINESS_NAME}</p>\n"
        "    </div>\n"
        '    <div class="content">\n'
        + _field("👤 Nombre Completo", name)
        + _field("📧 Correo Electrónico", _mailto(submission.email))
        + _field("📱 Teléfono", _tel(submission.phone))
        + cover_letter
        + '      <div class="cv-section">\n'
        '        <div class="field-label">📄 CV Adjunto</div>\n'
        '        <div class="field-value">\n'
        f"          ✅ Archivo PDF recibido: <strong>{escape_html(resume.filename)}</strong>"
        f" ({format_size_kb(resume.size_bytes)} KB)\n"
        "        </div>\n"
        '        <div class="cv-note">\n'
        "          El archivo CV está adjunto a este email. "
        "Descárgalo para revisar la candidatura completa.\n"
        "        </div>\n"
        "      </div>\n"
        "    </div>\n"
        '    <div class="footer">\n'
        f"      <p><strong>{BUSINESS_NAME}</strong></p>\n"
        f"      <p>📧 {escape_html(recipient)}</p>\n"
        '      <p style="margin-top: 15px; color: #999;">\n'
        "        Candidatura recibida desde el formulario de empleo del sitio web\n"
        "      </p>\n"
        "    </div>\n"
    )

    return OutboundEmail(
        sender=EMAIL_FROM,
        to=[recipient],
        subject=f"🚀 Nueva Candidatura - {name}",
        html=_document(_APPLICATION_STYLE, body),
        attachments=[
            EmailAttachment(
                filename=resume.filename,
                content=base64.b64encode(resume.content).decode("ascii"),
            )
        ],
    )


def build_application_confirmation(submission: ApplicationSubmission) -> OutboundEmail:
    """Build the acknowledgement sent back to the applicant."""
    body = (
        '    <div class="header">\n'
        "      <h1>✅ Candidatura Recibida</h1>\n"
        "    </div>\n"
        '    <div class="content">\n'
        f"      <p>Hola <strong>{escape_html(submission.full_name)}</strong>,</p>\n"
        f"      <p>Gracias por tu interés en unirte a <strong>{BUSINESS_NAME}</strong>.</p>\n"
        "      <p>Hemos recibido tu candidatura. Nuestro equipo de recursos humanos "
        "revisará tu CV y se pondrá en contacto contigo dentro de los próximos "
        "5 días laborales.</p>\n"
        "      <p>Si tienes alguna pregunta, no dudes en escribirnos a "
        f"<strong>{HR_CONTACT_ADDRESS}</strong>.</p>\n"
        "      <p>¡Muchas gracias por tu candidatura!</p>\n"
        f"      <p>Saludos,<br><strong>El equipo de {BUSINESS_NAME}</strong></p>\n"
        "    </div>\n"
        '    <div class="footer">\n'
        "      <p>Este es un email automático. Por favor, no respondas a este correo.</p>\n"
        "    </div>\n"
    )

    return OutboundEmail(
        sender=EMAIL_FROM,
        to=[submission.email],
        subject=CONFIRMATION_SUBJECT,
        html=_document(_BASE_STYLE, body),
    )


def build_contact_notification(
    submission: ContactSubmission, recipient: str
) -> OutboundEmail:
    """Build the business-inbox email for a contact-form message."""
    phone = _tel(submission.phone) if submission.phone else "<em>No proporcionado</em>"
    subject = escape_html(submission.subject)

    body = (
        '    <div class="header">\n'
        "      <h1>📧 Nuevo Mensaje de Contacto</h1>\n"
        f"      <p>Formulario de contacto - {BUSINESS_NAME}</p>\n"
        "    </div>\n"
        '    <div class="content">\n'
        + _field("👤 Nombre", escape_html(submission.name))
        + _field("📧 Correo Electrónico", _mailto(submission.email))
        + _field("📱 Teléfono", phone)
        + _field("🏷️ Asunto", subject)
        + '      <div class="message-section">\n'
        '        <div class="field-label">💬 Mensaje</div>\n'
        f'        <div class="message-content">{escape_html(submission.message)}</div>\n'
        "      </div>\n"
        "    </div>\n"
        '    <div class="footer">\n'
        f"      <p><strong>{BUSINESS_NAME}</strong></p>\n"
        "      <p>Este mensaje fue enviado desde el formulario de contacto "
        "de nuestro sitio web</p>\n"
        "    </div>\n"
    )

    return OutboundEmail(
        sender=EMAIL_FROM,
        to=[recipient],
        subject=f"Contacto web: {subject}",
        html=_document(_CONTACT_STYLE, body),
    )
