import io
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet


def generate_pdf_for_plan(rows, summary, primary_colour="#ff6b6b"):
    """Generate a PDF with a Day / Slot / Meal / Ingredients table and the shopping summary.

    rows: output of plan_rows(); summary: output of aggregate_ingredients().
    """
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    cell = styles["BodyText"]
    elements = [
        Paragraph("Daftar Menu Makanan Mingguan", styles["Title"]),
        Spacer(1, 16),
    ]

    header_style = TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(primary_colour)),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 12),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ])

    data = [["Day", "Slot", "Meal", "Ingredients"]]
    for row in rows:
        for meal in row["meals"]:
            ingredients = ", ".join(f"{i['name']} ({i['quantity']})" for i in meal["ingredients"]) or "-"
            data.append([row["title"], meal["label"], Paragraph(escape(meal["name"]), cell),
                         Paragraph(escape(ingredients), cell)])
    table = Table(data, repeatRows=1, colWidths=[90, 110, 180, 400])
    table.setStyle(header_style)
    elements.append(table)

    if summary:
        elements += [Spacer(1, 20), Paragraph("Ringkasan Bahan Belanja", styles["Heading2"])]
        shopping = Table([["Ingredient", "Quantity"]] + [[s["name"], s["quantity"]] for s in summary],
                         repeatRows=1, colWidths=[300, 200])
        shopping.setStyle(header_style)
        elements.append(shopping)

    doc.build(elements)
    return buf.getvalue()
