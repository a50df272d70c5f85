"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from series_export.config.settings.base import Settings
from series_export.config.settings.loaders import SettingsLoader
from series_export.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Merge the output of several loaders and apply overrides.

    Loaders run in order and later loaders win on overlapping fields, but
    only for values that differ from the field default, so a loader that
    found nothing cannot mask an earlier one. *overrides* win over
    everything.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~series_export.config.settings.base.Settings` subclass
            to construct.
        loaders:
            Ordered loaders. Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied last.

        Raises
        ------
        MissingRequiredSettingError
            A field without default is absent from every source.
        ConfigError
            A loader failed, or construction from the merged values failed.
        """
        merged: dict[str, Any] = {}
        fields = dataclasses.fields(settings_cls)  # type: ignore[arg-type]

        for loader in loaders or []:
            instance = loader.load(settings_cls)
            for field in fields:
                value = getattr(instance, field.name)
                if field.default is not dataclasses.MISSING and value == field.default:
                    continue
                merged[field.name] = value

        if overrides:
            unknown = set(overrides) - {f.name for f in fields}
            if unknown:
                raise ConfigError(
                    f"Unknown settings for {settings_cls.__name__}: {', '.join(sorted(unknown))}"
                )
            merged.update(overrides)

        for field in fields:
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
