"""PDF generation service for antenna cut sheets using ReportLab."""
import io
from datetime import datetime, timezone
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.units import inch
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, HRFlowable
)
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.enums import TA_CENTER

from models import AntennaVariant, AntennaDesigns
from services.display import render_design
from services.physics import format_length, estimate_impedance, estimate_gain


CYAN = colors.HexColor("#00BCD4")
GREEN = colors.HexColor("#4CAF50")
ORANGE = colors.HexColor("#FF9800")
BLUE = colors.HexColor("#2196F3")
PURPLE = colors.HexColor("#9C27B0")
DARK_BG = colors.HexColor("#1a1a1a")
DARKER_BG = colors.HexColor("#111111")
MID_GRAY = colors.HexColor("#333333")
LIGHT_GRAY = colors.HexColor("#888888")
WHITE = colors.white

VARIANT_COLORS = {
    AntennaVariant.VERTICAL: GREEN,
    AntennaVariant.DIPOLE: BLUE,
    AntennaVariant.YAGI: ORANGE,
    AntennaVariant.QUAD: PURPLE,
}


def _style(name, **kw):
    defaults = dict(fontName="Helvetica", fontSize=9, textColor=WHITE, leading=12)
    defaults.update(kw)
    return ParagraphStyle(name, **defaults)


STYLES = {
    "title": _style("title", fontSize=16, fontName="Helvetica-Bold", textColor=CYAN, leading=20),
    "subtitle": _style("subtitle", fontSize=10, textColor=LIGHT_GRAY),
    "section": _style("section", fontSize=11, fontName="Helvetica-Bold", leading=14),
    "label": _style("label", fontSize=8, textColor=LIGHT_GRAY),
    "value": _style("value", fontSize=8, textColor=WHITE),
    "hero_num": _style("hero_num", fontSize=20, fontName="Helvetica-Bold", alignment=TA_CENTER, leading=24),
    "hero_label": _style("hero_label", fontSize=7, textColor=LIGHT_GRAY, alignment=TA_CENTER),
    "note": _style("note", fontSize=7, textColor=LIGHT_GRAY, leading=10),
    "footer": _style("footer", fontSize=7, textColor=colors.HexColor("#444444"), alignment=TA_CENTER),
}


def _section_header(text, color):
    """Create a colored section header."""
    return Paragraph(f'<font color="{color.hexval()}">{text.upper()}</font>', STYLES["section"])


def _spec_rows(pairs):
    """Build a table of label-value rows."""
    data = [[Paragraph(label, STYLES["label"]), Paragraph(str(value), STYLES["value"])] for label, value in pairs]
    if not data:
        return Spacer(1, 0)
    t = Table(data, colWidths=[2.8 * inch, 4 * inch])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), DARK_BG),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
        ("LEFTPADDING", (0, 0), (-1, -1), 8),
        ("RIGHTPADDING", (0, 0), (-1, -1), 8),
        ("LINEBELOW", (0, 0), (-1, -2), 0.5, MID_GRAY),
        ("ROUNDEDCORNERS", [4, 4, 4, 4]),
    ]))
    return t


def _hero_card(value, label, color):
    """Single hero metric card."""
    data = [
        [Paragraph(f'<font color="{color.hexval()}">{value}</font>', STYLES["hero_num"])],
        [Paragraph(label, STYLES["hero_label"])],
    ]
    t = Table(data, colWidths=[1.8 * inch])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), DARK_BG),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (0, 0), 8),
        ("BOTTOMPADDING", (0, -1), (0, -1), 6),
        ("ROUNDEDCORNERS", [6, 6, 6, 6]),
    ]))
    return t


def _hero_row(designs: AntennaDesigns):
    cards = [
        _hero_card(f"{designs.frequency_mhz:g}", "FREQUENCY (MHz)", CYAN),
        _hero_card(format_length(designs.wavelength), "WAVELENGTH", GREEN),
        _hero_card(format_length(designs.dipole.half_wave), "HALF WAVE", BLUE),
    ]
    row = Table([cards], colWidths=[2.2 * inch] * 3)
    row.setStyle(TableStyle([
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("LEFTPADDING", (0, 0), (-1, -1), 2),
        ("RIGHTPADDING", (0, 0), (-1, -1), 2),
    ]))
    return row


def generate_cut_sheet_pdf(designs: AntennaDesigns, band_name: str = "", yagi_elements: int = 3) -> bytes:
    """Generate a one-page cut sheet for all four antenna types. Returns PDF bytes."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=letter,
        topMargin=0.5 * inch, bottomMargin=0.5 * inch,
        leftMargin=0.6 * inch, rightMargin=0.6 * inch,
    )

    story = []
    sp = Spacer(1, 8)

    story.append(Paragraph("Wire Antenna Cut Sheet", STYLES["title"]))
    subtitle = f"{designs.frequency_mhz:g} MHz"
    if band_name:
        subtitle = f"{band_name} | {subtitle}"
    story.append(Paragraph(subtitle, STYLES["subtitle"]))
    story.append(sp)
    story.append(_hero_row(designs))
    story.append(sp)

    for variant in AntennaVariant:
        design = designs.get(variant)
        color = VARIANT_COLORS[variant]
        story.append(_section_header(variant.value, color))
        story.append(Spacer(1, 4))
        rows = list(render_design(design).items())
        elements = yagi_elements if variant == AntennaVariant.YAGI else 1
        rows.append(("Estimated Impedance", f"{estimate_impedance(variant, designs.frequency_mhz):g} Ω"))
        rows.append(("Estimated Gain", f"{estimate_gain(variant, designs.frequency_mhz, elements):.2f} dBi"))
        story.append(_spec_rows(rows))
        story.append(sp)

    story.append(Paragraph(
        "Lengths include a 0.95 velocity factor for bare wire. Trim long and tune for lowest SWR.",
        STYLES["note"],
    ))
    story.append(HRFlowable(width="100%", thickness=0.5, color=MID_GRAY, spaceBefore=6, spaceAfter=4))
    generated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    story.append(Paragraph(f"Generated {generated}", STYLES["footer"]))

    def on_page(canvas, doc):
        canvas.saveState()
        canvas.setFillColor(DARKER_BG)
        canvas.rect(0, 0, letter[0], letter[1], fill=1, stroke=0)
        canvas.restoreState()

    doc.build(story, onFirstPage=on_page, onLaterPages=on_page)
    return buf.getvalue()
