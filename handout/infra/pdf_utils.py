import io
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from handout.utilities.constants import EMPTY_HANDOUT_MESSAGE


def _cell(text, style):
    # Paragraph parses a markup subset; user text must not be interpreted
    return Paragraph(escape(text or "").replace("\n", "<br/>"), style)


def generate_pdf_for_handout(treatment_plan, today: str = ""):
    """Generate the printable handout: one row per plan entry (Medication / Directions / Instructions / Notes)."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=24, leftMargin=24, topMargin=24, bottomMargin=24,
        title="Medication Handout",
    )

    styles = getSampleStyleSheet()
    body = styles["BodyText"]
    elements = [Paragraph("Medication Handout", styles["Title"])]
    if today:
        elements.append(Paragraph(escape(today), styles["Normal"]))
    elements.append(Spacer(1, 16))

    plan = list(treatment_plan)
    if not plan:
        elements.append(Paragraph(EMPTY_HANDOUT_MESSAGE, styles["Italic"]))
        doc.build(elements)
        return buf.getvalue()

    data = [["Medication", "Directions", "Instructions", "Notes"]]
    for entry in plan:
        data.append([
            _cell(entry.name, styles["Heading4"]),
            _cell(entry.directions, body),
            _cell(entry.instructions, body),
            _cell(entry.notes, body),
        ])

    table = Table(data, repeatRows=1, colWidths=[130, 130, 145, 140])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#1F6FB2")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("VALIGN", (0,0), (-1,-1), "TOP"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 11),
        ("BOTTOMPADDING", (0,0), (-1,0), 8),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
