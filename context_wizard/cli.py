"""Context Wizard CLI."""

import asyncio

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from .records.types import (
    CATEGORY_LABELS,
    OTHER_SECTOR,
    PESTLE_CATEGORIES,
    PRIORITY_SCALES,
    SECTORS,
    SWOT_CATEGORIES,
    Category,
    ImpactLevel,
    TowsCategory,
)
from .wizard.controller import DRAFT_LOADING_MESSAGE, TOWS_LOADING_MESSAGE
from .wizard.states import STEP_TITLES, WizardStep

console = Console()

PROFILE_PROMPTS = [
    ("analysis_date", "Tanggal Analisa (YYYY-MM-DD)"),
    ("user_name", "Nama Anda"),
    ("job_title", "Jabatan"),
    ("company_name", "Nama Perusahaan"),
]

IMPACT_CHOICES = [level.value for level in ImpactLevel]
PRIORITY_CHOICES = [str(p) for p in PRIORITY_SCALES]
CATEGORY_CHOICES = [c.value for c in Category]


@click.group()
def main():
    """Context Wizard - AI-assisted ISO 9001:2015 context analysis."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"context-wizard v{__version__}")


@main.command()
def sectors():
    """List the selectable company sectors."""
    table = Table()
    table.add_column("Value", style="cyan")
    table.add_column("Label")
    for value, label in SECTORS.items():
        table.add_row(value, label)
    console.print(table)


@main.command()
@click.option("--provider", "-p", type=click.Choice(["openai", "anthropic"]), default=None,
              help="AI provider (default from CONTEXT_WIZARD_PROVIDER or openai)")
@click.option("--model", "-m", default=None, help="Override the provider's model")
@click.option("--output-dir", "-o", type=click.Path(file_okay=False), default=None,
              help="Directory for the exported PDF")
def run(provider: str, model: str, output_dir: str):
    """Run the interactive context analysis wizard."""
    from pathlib import Path
    from .agents.drafting import DraftingGateway
    from .agents.providers import create_provider
    from .config import WizardConfig, setup_logging
    from .report.exporter import ReportExporter
    from .wizard.controller import WizardController

    config = WizardConfig.from_env()
    if provider:
        config.provider = provider
    if model:
        config.model = model
    if output_dir:
        config.output_dir = Path(output_dir)
    setup_logging(config.log_level)

    try:
        llm = create_provider(config.provider, config.model)
    except Exception as e:
        raise click.ClickException(f"Cannot start {config.provider} provider: {e}") from e
    gateway = DraftingGateway(llm)
    controller = WizardController(gateway, ReportExporter(config.output_dir))

    console.print(Panel.fit(
        "Analisis Konteks Organisasi ISO 9001:2015",
        subtitle=f"provider: {config.provider}",
    ))
    asyncio.run(run_wizard(controller))


async def run_wizard(controller) -> None:
    """Drive the controller until the user quits."""
    screens = {
        WizardStep.PROFILE: _profile_screen,
        WizardStep.VALIDATE_ANALYSIS: _analysis_screen,
        WizardStep.VALIDATE_TOWS: _tows_screen,
        WizardStep.REPORT: _report_screen,
    }
    while True:
        if controller.error:
            console.print(f"\n[red]{controller.error}[/red]")
            Prompt.ask("Tekan Enter untuk coba lagi", default="", show_default=False)
            controller.clear_error()
            continue

        console.rule(f"[bold]{STEP_TITLES[controller.step]}[/bold]")
        keep_going = await screens[controller.step](controller)
        if not keep_going:
            console.print("[dim]Sampai jumpa.[/dim]")
            return


def _ask(label: str, current: str) -> str:
    return Prompt.ask(label, default=current, show_default=bool(current))


# Screens return False when the user quits


async def _profile_screen(controller) -> bool:
    profile = controller.profile
    for name, label in PROFILE_PROMPTS:
        setattr(profile, name, _ask(label, getattr(profile, name)))

    profile.sector = Prompt.ask("Sektor Perusahaan", choices=list(SECTORS), default=profile.sector)
    if profile.sector == OTHER_SECTOR:
        profile.custom_sector = _ask("Sebutkan Sektor Perusahaan Anda", profile.custom_sector)
    profile.unit_name = _ask("Nama Bagian / Unit", profile.unit_name)

    missing = profile.missing_fields()
    if missing:
        console.print(f"[yellow]Lengkapi dulu: {', '.join(missing)}[/yellow]")
        return Confirm.ask("Isi ulang profil?", default=True)

    with console.status(DRAFT_LOADING_MESSAGE):
        await controller.submit_profile()
    return True


def _factor_table(controller, category: Category) -> Table:
    table = Table(title=CATEGORY_LABELS[category], title_justify="left")
    table.add_column("ID", style="dim")
    table.add_column("Faktor")
    table.add_column("Dampak")
    table.add_column("Prioritas", justify="right")
    for factor in controller.store.factors(category):
        table.add_row(str(factor.id), escape(factor.text), factor.impact.value, str(factor.priority))
    return table


async def _analysis_screen(controller) -> bool:
    console.print("\n[bold #003366]Analisis SWOT[/bold #003366]")
    for category in SWOT_CATEGORIES:
        console.print(_factor_table(controller, category))
    console.print("\n[bold #003366]Analisis PESTLE[/bold #003366]")
    for category in PESTLE_CATEGORIES:
        console.print(_factor_table(controller, category))

    action = Prompt.ask(
        "Aksi (a=tambah, e=edit, d=hapus, g=generate AI, b=kembali, n=lanjut, q=keluar)",
        choices=["a", "e", "d", "g", "b", "n", "q"],
        default="n",
    )
    if action == "q":
        return False
    if action == "b":
        controller.back()
    elif action == "n":
        with console.status(TOWS_LOADING_MESSAGE):
            await controller.proceed_to_tows()
    else:
        category = Category.from_string(Prompt.ask("Kategori", choices=CATEGORY_CHOICES))
        if action == "a":
            text = Prompt.ask(f"Tambah {CATEGORY_LABELS[category]} manual", default="")
            if controller.add_factor(category, text) is None:
                console.print("[yellow]Teks kosong, tidak ditambahkan[/yellow]")
        elif action == "g":
            with console.status(f"Generate AI: {category.value}...", spinner="dots"):
                await controller.generate_more(category)
        elif action == "d":
            factor_id = IntPrompt.ask("ID")
            if not controller.delete_factor(category, factor_id):
                console.print(f"[yellow]ID {factor_id} tidak ditemukan[/yellow]")
        elif action == "e":
            _edit_factor(controller, category)
    return True


def _edit_factor(controller, category: Category) -> None:
    factor_id = IntPrompt.ask("ID")
    field_name = Prompt.ask("Field", choices=["text", "impact", "priority"], default="impact")
    if field_name == "impact":
        value = Prompt.ask("Dampak", choices=IMPACT_CHOICES)
    elif field_name == "priority":
        value = int(Prompt.ask("Prioritas", choices=PRIORITY_CHOICES))
    else:
        value = Prompt.ask("Teks")
    if not controller.update_factor(category, factor_id, field_name, value):
        console.print(f"[yellow]ID {factor_id} tidak ditemukan[/yellow]")


async def _tows_screen(controller) -> bool:
    for tows_category in TowsCategory:
        table = Table(title=f"Strategi {tows_category.value}", title_justify="left")
        table.add_column("ID", style="dim")
        table.add_column("Strategi")
        table.add_column("Dampak")
        table.add_column("Prioritas", justify="right")
        for strategy in controller.store.tows:
            if strategy.category is tows_category:
                table.add_row(
                    str(strategy.id), escape(strategy.text), strategy.impact.value, str(strategy.priority)
                )
        console.print(table)

    action = Prompt.ask(
        "Aksi (e=edit, b=kembali, n=laporan final, q=keluar)",
        choices=["e", "b", "n", "q"],
        default="n",
    )
    if action == "q":
        return False
    if action == "b":
        controller.back()
    elif action == "n":
        controller.show_report()
    else:
        strategy_id = IntPrompt.ask("ID")
        field_name = Prompt.ask("Field", choices=["impact", "priority"], default="priority")
        if field_name == "impact":
            value = Prompt.ask("Dampak", choices=IMPACT_CHOICES)
        else:
            value = int(Prompt.ask("Prioritas", choices=PRIORITY_CHOICES))
        if not controller.update_tows_strategy(strategy_id, field_name, value):
            console.print(f"[yellow]ID {strategy_id} tidak ditemukan[/yellow]")
    return True


async def _report_screen(controller) -> bool:
    view = controller.report_view()

    console.print("\n[bold]1. Identitas Perusahaan[/bold]")
    for label, value in view.identity:
        console.print(f"  [bold]{label}:[/bold] {escape(value)}")
    console.print("\n[bold]2. Ringkasan Analisis & Relevansi dengan ISO 9001:2015[/bold]")
    console.print(view.summary)

    for title, rows in (("3. Analisis SWOT", view.swot_rows), ("4. Analisis PESTLE", view.pestle_rows)):
        table = Table(title=title, title_justify="left")
        for column in ("Kategori", "Faktor", "Dampak", "Prioritas"):
            table.add_column(column)
        for row in rows:
            table.add_row(row.category, escape(row.text), row.impact, str(row.priority))
        console.print(table)

    table = Table(title="5. Rekomendasi Strategis (TOWS) - Berdasarkan Prioritas", title_justify="left")
    for column in ("Prioritas", "Kategori", "Rekomendasi Strategi", "Dampak"):
        table.add_column(column)
    for row in view.tows_rows:
        table.add_row(str(row.priority), row.category, escape(row.text), row.impact)
    console.print(table)

    action = Prompt.ask(
        "Aksi (x=ekspor PDF, b=kembali, r=mulai ulang, q=keluar)",
        choices=["x", "b", "r", "q"],
        default="x",
    )
    if action == "q":
        return False
    if action == "b":
        controller.back()
    elif action == "r":
        controller.restart()
    else:
        with console.status("Mengekspor PDF..."):
            path = controller.export_pdf()
        if path:
            console.print(f"[green]PDF tersimpan: {path}[/green]")
    return True
