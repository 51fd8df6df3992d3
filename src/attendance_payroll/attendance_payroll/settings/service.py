from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.validators import require_single_char
from ..core.enums import Currency, DayType, ReservedCode, SalaryMode
from ..core.exceptions import ValidationError
from ..jalali.converter import is_valid_date_key
from .model import CustomCode, ProjectSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


def _require_date_key(date_key: str) -> str:
    if not is_valid_date_key(date_key):
        raise ValidationError(f"Invalid date: {date_key!r}")
    return date_key


class SettingsService:
    """Use case: per-project day rules, salary base and attendance codes."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self, project_id: str) -> ProjectSettings:
        return self._settings.get(project_id) or ProjectSettings()

    def _save(self, project_id: str, settings: ProjectSettings) -> ProjectSettings:
        self._settings.save(project_id, settings)
        return settings

    def update(
        self,
        project_id: str,
        *,
        base_day_count: Optional[int] = None,
        salary_mode: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> ProjectSettings:
        current = self.get(project_id)
        changes = {}
        if base_day_count is not None:
            if int(base_day_count) <= 0:
                raise ValidationError("Base day count must be positive")
            changes["base_day_count"] = int(base_day_count)
        try:
            if salary_mode is not None:
                changes["salary_mode"] = SalaryMode(salary_mode)
            if currency is not None:
                changes["currency"] = Currency(currency)
        except ValueError as e:
            raise ValidationError(str(e)) from None

        logger.info("Updating settings of project %s: %s", project_id, sorted(changes))
        return self._save(project_id, replace(current, **changes))

    def toggle_holiday(self, project_id: str, date_key: str) -> bool:
        """Flip a date in/out of the holiday set; returns whether it is now a holiday."""
        _require_date_key(date_key)
        current = self.get(project_id)
        if date_key in current.holidays:
            holidays = current.holidays - {date_key}
        else:
            holidays = current.holidays | {date_key}
        self._save(project_id, replace(current, holidays=holidays))
        return date_key in holidays

    def set_day_override(self, project_id: str, date_key: str, day_type: Optional[str]) -> ProjectSettings:
        """Force a date's type; ``None`` clears the override."""
        _require_date_key(date_key)
        current = self.get(project_id)
        overrides = dict(current.day_type_overrides)
        if day_type:
            try:
                overrides[date_key] = DayType(day_type)
            except ValueError:
                raise ValidationError(f"Unknown day type: {day_type!r}") from None
        else:
            overrides.pop(date_key, None)
        return self._save(project_id, replace(current, day_type_overrides=overrides))

    def add_custom_code(self, project_id: str, *, char: str, description: str = "", color: str = "") -> ProjectSettings:
        char = require_single_char(char, "Code").lower()
        if char.isdigit():
            raise ValidationError("Digits are reserved for worked hours")
        current = self.get(project_id)
        if current.find_code(char):
            raise ValidationError(f"Code {char!r} already exists")
        codes = current.custom_codes + (CustomCode(char=char, description=description.strip(), color=color.strip()),)
        return self._save(project_id, replace(current, custom_codes=codes))

    def remove_custom_code(self, project_id: str, char: str) -> ProjectSettings:
        if ReservedCode.lookup(char or ""):
            raise ValidationError("System codes cannot be removed")
        current = self.get(project_id)
        if not current.find_code(char):
            raise ValidationError(f"Unknown code: {char!r}")
        codes = tuple(c for c in current.custom_codes if c.char != char)
        return self._save(project_id, replace(current, custom_codes=codes))
