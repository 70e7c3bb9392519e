"""Wizard Controller - drives the context analysis screens."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from context_wizard.agents.drafting import DraftingGateway
from context_wizard.errors import ExportError, ServiceError, TransitionError
from context_wizard.records.store import RecordStore
from context_wizard.records.types import Category, Profile
from context_wizard.report.exporter import ReportExporter
from context_wizard.report.view import ReportView, build_report_view
from context_wizard.wizard.logging import WizardLogger
from context_wizard.wizard.states import PREVIOUS_STEP, WizardStep, can_transition

logger = logging.getLogger(__name__)

DRAFT_LOADING_MESSAGE = "Melakukan riset internet dan menyusun draf analisis SWOT & PESTLE..."
TOWS_LOADING_MESSAGE = "Menyusun strategi TOWS berdasarkan analisis SWOT Anda..."

DRAFT_ERROR = "Gagal menghasilkan analisis. Silakan coba lagi."
TOWS_ERROR = "Gagal menyusun strategi TOWS. Silakan coba lagi."
MORE_ERROR = "Gagal menghasilkan poin tambahan untuk {category}."
EXPORT_ERROR = "Gagal membuat file PDF. Silakan coba lagi."
MISSING_VIEW_ERROR = "Elemen laporan tidak ditemukan untuk diekspor."


@dataclass
class WizardState:
    """Everything one wizard session holds. Nothing outlives the session."""

    step: WizardStep = WizardStep.PROFILE
    profile: Profile = field(default_factory=Profile)
    store: RecordStore = field(default_factory=RecordStore)
    is_loading: bool = False
    loading_message: str = ""
    is_exporting: bool = False
    error: Optional[str] = None
    generating: dict[Category, bool] = field(default_factory=dict)


class WizardController:
    """
    Finite state machine over the wizard screens.

    Screen-level generation (initial draft, TOWS) sets a blocking loading
    flag and suppresses transitions until it finishes. Per-category
    "generate more" calls only mark their own category busy.
    """

    def __init__(
        self,
        gateway: DraftingGateway,
        exporter: Optional[ReportExporter] = None,
    ):
        self.gateway = gateway
        self.exporter = exporter or ReportExporter(Path.cwd())
        self.events = WizardLogger()
        self.state = WizardState()

    @property
    def step(self) -> WizardStep:
        return self.state.step

    @property
    def profile(self) -> Profile:
        return self.state.profile

    @property
    def store(self) -> RecordStore:
        return self.state.store

    @property
    def error(self) -> Optional[str]:
        return self.state.error

    @property
    def is_loading(self) -> bool:
        return self.state.is_loading

    def is_generating(self, category: Category) -> bool:
        return self.state.generating.get(category, False)

    def clear_error(self) -> None:
        """Dismiss the current error so the user can retry."""
        self.state.error = None

    def _fail(self, operation: str, message: str, exc: Exception) -> None:
        self.state.error = message
        self.events.error(operation, type(exc).__name__, str(exc))
        logger.debug(f"{operation} failed", exc_info=exc)

    def _move(self, to_step: WizardStep) -> None:
        from_step = self.state.step
        if not can_transition(from_step, to_step):
            raise TransitionError(
                f"Cannot move from {from_step.name} to {to_step.name}",
                from_step=from_step,
                to_step=to_step,
            )
        self.state.step = to_step
        self.events.step_transition(from_step.name, to_step.name)

    # Navigation

    async def submit_profile(self) -> bool:
        """
        Leave the profile screen by drafting SWOT and PESTLE.

        Returns False without calling the service when the profile is
        incomplete or another screen-level call is running.
        """
        if self.state.step is not WizardStep.PROFILE:
            raise TransitionError("Profile can only be submitted from the profile screen")
        if self.state.is_loading or not self.profile.is_complete:
            return False

        self.state.is_loading = True
        self.state.loading_message = DRAFT_LOADING_MESSAGE
        self.state.error = None
        self.events.generation_started("initial_draft")
        started = time.monotonic()
        try:
            draft = await self.gateway.generate_initial_draft(self.profile)
        except ServiceError as e:
            self._fail("initial_draft", DRAFT_ERROR, e)
            return False
        finally:
            self.state.is_loading = False

        self.store.load_initial_draft(draft)
        item_count = sum(len(self.store.factors(c)) for c in Category)
        self.events.generation_complete("initial_draft", item_count, time.monotonic() - started)
        self._move(WizardStep.VALIDATE_ANALYSIS)
        return True

    async def proceed_to_tows(self) -> bool:
        """Draft TOWS strategies and move to the TOWS screen."""
        if self.state.step is not WizardStep.VALIDATE_ANALYSIS:
            raise TransitionError("TOWS can only be generated from the analysis screen")
        if self.state.is_loading:
            return False

        self.state.is_loading = True
        self.state.loading_message = TOWS_LOADING_MESSAGE
        self.state.error = None
        self.events.generation_started("tows")
        started = time.monotonic()
        try:
            draft = await self.gateway.generate_tows(self.store.swot)
        except ServiceError as e:
            self._fail("tows", TOWS_ERROR, e)
            return False
        finally:
            self.state.is_loading = False

        strategies = self.store.replace_tows(draft)
        self.events.generation_complete("tows", len(strategies), time.monotonic() - started)
        self._move(WizardStep.VALIDATE_TOWS)
        return True

    def show_report(self) -> bool:
        if self.state.is_loading:
            return False
        self._move(WizardStep.REPORT)
        return True

    def back(self) -> bool:
        """Return to the previous screen, keeping all data."""
        if self.state.is_loading:
            return False
        previous = PREVIOUS_STEP.get(self.state.step)
        if previous is None:
            raise TransitionError(f"No previous step from {self.state.step.name}")
        self._move(previous)
        return True

    def restart(self) -> None:
        """Discard everything and start again from an empty profile."""
        if self.state.step is not WizardStep.REPORT:
            raise TransitionError("Restart is only available from the report screen")
        self.state = WizardState()
        self.events.restarted()

    # Per-category generation

    async def generate_more(self, category: Category) -> bool:
        """Append AI-drafted points to one category."""
        if self.is_generating(category):
            return False

        self.state.generating[category] = True
        self.state.error = None
        self.events.generation_started("generate_more", category.value)
        started = time.monotonic()
        try:
            texts = await self.gateway.generate_more_for_category(
                self.profile, category, self.store.texts(category)
            )
        except ServiceError as e:
            self._fail("generate_more", MORE_ERROR.format(category=category.value), e)
            return False
        finally:
            self.state.generating[category] = False

        # Lands on whatever lists the store holds now, even after a redraft
        added = self.store.append_generated(category, texts)
        self.events.generation_complete("generate_more", len(added), time.monotonic() - started)
        return True

    # Editing

    def add_factor(self, category: Category, text: str):
        return self.store.add_factor(category, text)

    def update_factor(self, category: Category, factor_id: int, field_name: str, value) -> bool:
        return self.store.update_factor(category, factor_id, field_name, value)

    def delete_factor(self, category: Category, factor_id: int) -> bool:
        return self.store.delete_factor(category, factor_id)

    def update_tows_strategy(self, strategy_id: int, field_name: str, value) -> bool:
        return self.store.update_tows_strategy(strategy_id, field_name, value)

    # Report

    def report_view(self) -> Optional[ReportView]:
        """The compiled report, which only exists on the report screen."""
        if self.state.step is not WizardStep.REPORT:
            return None
        return build_report_view(self.profile, self.store)

    def export_pdf(self) -> Optional[Path]:
        """Export the report screen to PDF. Returns None and sets the error on failure."""
        view = self.report_view()
        self.state.is_exporting = True
        try:
            path = self.exporter.export_to_pdf(view)
        except ExportError as e:
            self._fail("export", MISSING_VIEW_ERROR if view is None else EXPORT_ERROR, e)
            return None
        finally:
            self.state.is_exporting = False

        self.events.export_complete(str(path))
        return path
