# context_wizard/report/exporter.py
"""Render the compiled report view to a paginated PDF."""

import io
import logging
import re
from pathlib import Path
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from context_wizard.errors import ExportError
from context_wizard.report.view import ReportView

logger = logging.getLogger(__name__)

FILE_PREFIX = "Analisis_Konteks_"
FALLBACK_NAME = "Perusahaan"

NAVY = colors.HexColor("#003366")
LIGHT = colors.HexColor("#f1f5f9")
BORDER = colors.HexColor("#cbd5e1")


def export_file_name(company_name: str) -> str:
    """File name for a company's report; whitespace runs become one underscore."""
    slug = re.sub(r"\s+", "_", (company_name or "").strip())
    return f"{FILE_PREFIX}{slug or FALLBACK_NAME}.pdf"


class ReportExporter:
    """Writes ReportView objects as A4 PDF documents."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

        base = getSampleStyleSheet()
        self.title_style = ParagraphStyle(
            "ReportTitle", parent=base["Title"], textColor=NAVY, alignment=TA_CENTER
        )
        self.h1_style = ParagraphStyle(
            "ReportH1", parent=base["Heading2"], textColor=NAVY, spaceBefore=8, spaceAfter=4
        )
        self.body_style = ParagraphStyle(
            "ReportBody", parent=base["BodyText"], fontSize=9, leading=12, alignment=TA_JUSTIFY
        )
        self.cell_style = ParagraphStyle(
            "ReportCell", parent=base["BodyText"], fontSize=8, leading=10
        )

    def export_to_pdf(self, view: Optional[ReportView]) -> Path:
        """
        Render a report view and save it under the output directory.

        Args:
            view: Compiled report; None means there is nothing to export

        Returns:
            Path of the written PDF

        Raises:
            ExportError: If the view is missing or rendering fails
        """
        if view is None:
            raise ExportError("Report view not found for export")

        path = self.output_dir / export_file_name(view.company_name)

        # Build in memory so a failed render leaves no partial file
        try:
            pdf_bytes = self.render(view)
        except Exception as e:
            logger.error(f"PDF render failed: {e}", exc_info=True)
            raise ExportError(f"Failed to render PDF: {e}", path=str(path)) from e

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(pdf_bytes)
        except OSError as e:
            raise ExportError(f"Failed to write PDF: {e}", path=str(path)) from e

        logger.info(f"Exported report to {path}")
        return path

    def render(self, view: ReportView) -> bytes:
        """Lay out the report and return the PDF bytes."""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=15 * mm,
            rightMargin=15 * mm,
            topMargin=15 * mm,
            bottomMargin=15 * mm,
            title=f"Analisis Konteks {view.company_name}".strip(),
        )
        doc.build(self._story(view, doc.width))
        return buffer.getvalue()

    def _p(self, text, style=None) -> Paragraph:
        return Paragraph(escape(str(text)), style or self.cell_style)

    def _table(self, header: list[str], rows: list[list], widths: list[float]) -> Table:
        data = [[self._p(h) for h in header]]
        data.extend([self._p(cell) for cell in row] for row in rows)
        table = Table(data, colWidths=widths, repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), LIGHT),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("GRID", (0, 0), (-1, -1), 0.5, BORDER),
            ("TOPPADDING", (0, 0), (-1, -1), 3),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
        ]))
        return table

    def _story(self, view: ReportView, width: float) -> list:
        story = [
            Paragraph("Laporan Final: Analisis Konteks Organisasi", self.title_style),
            Spacer(1, 4 * mm),
            Paragraph("1. Identitas Perusahaan", self.h1_style),
        ]
        for label, value in view.identity:
            story.append(Paragraph(f"<b>{escape(label)}:</b> {escape(value)}", self.body_style))

        story.append(Paragraph("2. Ringkasan Analisis &amp; Relevansi dengan ISO 9001:2015", self.h1_style))
        story.append(self._p(view.summary, self.body_style))

        factor_widths = [0.18 * width, 0.56 * width, 0.13 * width, 0.13 * width]

        story.append(Paragraph("3. Analisis SWOT", self.h1_style))
        story.append(self._table(
            ["Kategori", "Faktor", "Dampak", "Prioritas"],
            [[r.category, r.text, r.impact, r.priority] for r in view.swot_rows],
            factor_widths,
        ))

        story.append(Paragraph("4. Analisis PESTLE", self.h1_style))
        story.append(self._table(
            ["Kategori", "Faktor Eksternal", "Dampak", "Prioritas"],
            [[r.category, r.text, r.impact, r.priority] for r in view.pestle_rows],
            factor_widths,
        ))

        story.append(Paragraph(
            "5. Rekomendasi Strategis (TOWS) - Berdasarkan Prioritas", self.h1_style
        ))
        story.append(self._table(
            ["Prioritas", "Kategori", "Rekomendasi Strategi", "Dampak"],
            [[r.priority, r.category, r.text, r.impact] for r in view.tows_rows],
            [0.12 * width, 0.12 * width, 0.62 * width, 0.14 * width],
        ))
        return story
