"""Shared HTML layout for donor emails."""

from datetime import date, datetime
from html import escape

STYLE = """
    body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { background: linear-gradient(135deg, #f59e0b 0%, #f97316 100%); color: white; padding: 30px; text-align: center; border-radius: 10px 10px 0 0; }
    .content { background: #f9fafb; padding: 30px; border-radius: 0 0 10px 10px; }
    .info-box { background: white; padding: 20px; margin: 15px 0; border-radius: 8px; border-left: 4px solid #f59e0b; }
    .info-row { margin: 10px 0; }
    .label { font-weight: bold; color: #f59e0b; }
    .footer { text-align: center; margin-top: 20px; color: #6b7280; font-size: 14px; }
"""

FOOTER = "This is an automated notification from the Food Sharing Platform"


def fmt_date(value) -> str:
    """Human-readable date; event payloads carry ISO strings."""
    if isinstance(value, str) and value:
        try:
            if len(value) == 10:
                value = date.fromisoformat(value)
            else:
                value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    if isinstance(value, datetime):
        return value.strftime("%B %d, %Y %H:%M")
    if isinstance(value, date):
        return value.strftime("%B %d, %Y")
    return str(value) if value else "N/A"


def row(label: str, value) -> str:
    return f'<div class="info-row"><span class="label">{escape(label)}:</span> {escape(str(value))}</div>'


def notes_row(label: str, notes) -> str:
    """Notes block, or nothing at all when there are no notes."""
    if not notes:
        return ""
    return (
        f'<div class="info-row"><span class="label">{escape(label)}:</span><br/>'
        f'<em style="color: #6b7280;">{escape(str(notes))}</em></div>'
    )


def box(title: str, rows: list[str]) -> str:
    body = "\n".join(r for r in rows if r)
    return f'<div class="info-box"><h3 style="margin-top: 0; color: #f59e0b;">{escape(title)}</h3>\n{body}\n</div>'


def page(heading: str, greeting_name, paragraphs_before: list[str], boxes: list[str], paragraphs_after: list[str]) -> str:
    before = "\n".join(f"<p>{p}</p>" for p in paragraphs_before)
    after = "\n".join(f"<p>{p}</p>" for p in paragraphs_after)
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        f"<style>{STYLE}</style>\n"
        "</head>\n<body>\n"
        '<div class="container">\n'
        f'<div class="header"><h1 style="margin: 0;">{escape(heading)}</h1></div>\n'
        '<div class="content">\n'
        f"<p>Hello <strong>{escape(str(greeting_name))}</strong>,</p>\n"
        f"{before}\n"
        + "\n".join(boxes)
        + f"\n{after}\n"
        "</div>\n"
        f'<div class="footer"><p>{FOOTER}</p></div>\n'
        "</div>\n</body>\n</html>\n"
    )
