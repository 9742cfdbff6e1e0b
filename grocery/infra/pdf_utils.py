import io
from xml.sax.saxutils import escape
from datetime import datetime
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from grocery.domain.GroceryList import GroceryList
from grocery.domain.numbers import format_money, format_quantity
from grocery.utilities.constants import GENERATED_AT_FORMAT


def generate_pdf_for_grocery_list(grocery_list: GroceryList, generated_at: Optional[datetime] = None) -> bytes:
    """Generate a PDF table: Item / Quantity / Unit price / Cost, followed by the total line."""
    generated_at = generated_at or datetime.now()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20)

    styles = getSampleStyleSheet()
    recipes = ", ".join(f"{escape(r.name)} (serves {r.servings})" for r in grocery_list.recipes) or "-"
    elements = [
        Paragraph("Grocery List", styles["Title"]),
        Paragraph(f"Generated: {generated_at.strftime(GENERATED_AT_FORMAT)}", styles["Normal"]),
        Paragraph(f"Recipes: {recipes}", styles["Normal"]),
        Spacer(1, 16),
    ]

    data = [["", "Item", "Quantity", "Unit price", "Cost"]]
    for item in grocery_list.items:
        if item.is_priced:
            data.append(["[ ]", item.name, f"{format_quantity(item.quantity)} {item.unit}",
                         f"{format_money(item.unit_price)} / {item.unit}", format_money(item.cost)])
        else:
            data.append(["[ ]", item.name, f"{format_quantity(item.quantity)} unit(s)",
                         "not available", "-"])
    data.append(["", grocery_list.total_label, "", "", format_money(grocery_list.total)])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
