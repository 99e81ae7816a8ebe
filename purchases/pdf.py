"""PDF rendering of the category report using ReportLab."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from .report import Bucket, bucket_value, sort_buckets


def generate_pdf(
    buckets: list[Bucket],
    output_path: str | Path,
    title: str | None = None,
) -> Path:
    """Generate a PDF file from report buckets.

    Args:
        buckets: Buckets as returned by ``bucket_by_category``.
        output_path: Where to save the PDF file.
        title: Document heading. Defaults to today's date.

    Returns:
        Path to the generated PDF file.

    Raises:
        ImportError: If reportlab is not installed.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )
    except ImportError:
        raise ImportError(
            "reportlab is required for PDF output: pip install 'purchases[pdf]'"
        )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if title is None:
        title = f"Spend by category ({date.today().isoformat()})"

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
    )
    styles = getSampleStyleSheet()

    ordered = sort_buckets(buckets)
    total_value = sum(bucket_value(b) for b in ordered)
    total_count = sum(len(b.purchases) for b in ordered)

    table_data = [["Category", "Purchases", "Value"]]
    for bucket in ordered:
        table_data.append([
            bucket.category.format(),
            str(len(bucket.purchases)),
            f"{bucket_value(bucket):.2f}",
        ])
    table_data.append(["total", str(total_count), f"{total_value:.2f}"])

    t = Table(table_data, colWidths=[60 * mm, 35 * mm, 40 * mm])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4A90D9")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ROWBACKGROUNDS", (0, 1), (-1, -2), [colors.white, colors.HexColor("#F5F5F5")]),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]))

    elements: list = [
        Paragraph(title, styles["Title"]),
        Spacer(1, 6 * mm),
        t,
    ]
    doc.build(elements)
    return output_path
