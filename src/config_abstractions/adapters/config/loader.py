"""Layered configuration loader with caching and profile support."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from config_abstractions import __init__conf__

logger = logging.getLogger(__name__)


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Validate a profile name using lib_layered_config.

    Delegates to ``validate_profile_name`` which rejects empty names, names
    that are too long, invalid characters, Windows reserved names and path
    traversal attempts.

    Args:
        profile: The profile name to validate.
        max_length: Optional maximum length. Defaults to DEFAULT_MAX_PROFILE_LENGTH.

    Raises:
        ValueError: If the profile name is invalid.

    Examples:
        >>> validate_profile("production")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    length = max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH
    validate_profile_name(profile, max_length=length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled default configuration file.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


class LayeredConfigLoader:
    """Load layered configuration for one application identity.

    Configuration is read from defaults → app → host → user → dotenv → env
    and cached per ``(profile, start_dir)`` for the process lifetime until
    :meth:`cache_clear` is called. Host applications build one loader for
    their own vendor/app/slug and inject it into a ``ConfigurationManager``.

    Args:
        vendor: Vendor name used for macOS and Windows paths.
        app: Application name used for macOS and Windows paths.
        slug: Directory name used for Linux paths and env var prefixes.
        default_file: Optional bundled defaults forming the lowest layer.
        cache_size: Number of ``(profile, start_dir)`` results kept.

    Example:
        >>> loader = LayeredConfigLoader(vendor="Acme", app="Tool", slug="acme-tool")
        >>> loader.slug
        'acme-tool'
    """

    def __init__(
        self,
        *,
        vendor: str,
        app: str,
        slug: str,
        default_file: Path | None = None,
        cache_size: int = 4,
    ) -> None:
        self.vendor = vendor
        self.app = app
        self.slug = slug
        self.default_file = default_file
        self._cached_read = lru_cache(maxsize=cache_size)(self._read)

    def _read(self, profile: str | None, start_dir: str | None) -> Config:
        logger.debug("Reading layered configuration", extra={"slug": self.slug, "profile": profile})
        return read_config(
            vendor=self.vendor,
            app=self.app,
            slug=self.slug,
            profile=profile,
            default_file=self.default_file,
            start_dir=start_dir,
        )

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the cached Config for ``profile``, validating the name first.

        Raises:
            ValueError: If ``profile`` is not a valid profile name.
        """
        if profile is not None:
            validate_profile(profile)
        return self._cached_read(profile, start_dir)

    def cache_clear(self) -> None:
        """Forget cached Config objects so the next call re-reads all layers."""
        self._cached_read.cache_clear()


def build_config_loader(
    *,
    vendor: str,
    app: str,
    slug: str,
    default_file: Path | None = None,
) -> LayeredConfigLoader:
    """Create a loader for a host application's configuration."""
    return LayeredConfigLoader(vendor=vendor, app=app, slug=slug, default_file=default_file)


#: Loader for this package's own configuration (used by the CLI).
get_config = LayeredConfigLoader(
    vendor=__init__conf__.LAYEREDCONF_VENDOR,
    app=__init__conf__.LAYEREDCONF_APP,
    slug=__init__conf__.LAYEREDCONF_SLUG,
    default_file=get_default_config_path(),
)


__all__ = [
    "LayeredConfigLoader",
    "build_config_loader",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
