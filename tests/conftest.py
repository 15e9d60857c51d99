"""Pytest configuration for the getprose test suite.

Hypothesis runs under one of three profiles:
    dev      500 examples, random seed; the local default
    ci       50 examples, fixed seed, failure blobs printed; chosen when CI=true
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE names a profile explicitly and beats CI detection.

Tests marked @pytest.mark.fuzz are long-running property tests. They are
collected but skipped unless the run selects them: pytest -m fuzz

Shared fixtures build real compiled catalogs (see tests/helpers/catalogs.py)
so registry and localizer tests go through Babel's .mo parser.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from getprose import BytesCatalogLoader, CatalogRegistry, Locale
from tests.helpers.catalogs import default_sources

# -----------------------------------------------------------------------------
# Hypothesis profiles
# -----------------------------------------------------------------------------

_ALL_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_ALL_PHASES, **_options)  # type: ignore[arg-type]


def _detect_profile() -> str:
    """Pick the profile: HYPOTHESIS_PROFILE, then CI=true, then dev."""
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested is not None and requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


# -----------------------------------------------------------------------------
# fuzz marker
# -----------------------------------------------------------------------------


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running property tests, skipped unless selected with -m fuzz",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests when the -m expression does not mention them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip = pytest.mark.skip(reason="fuzz test; select with -m fuzz")
    for item in filter(lambda item: "fuzz" in item.keywords, items):
        item.add_marker(skip)


# -----------------------------------------------------------------------------
# Shared fixtures
# -----------------------------------------------------------------------------


@pytest.fixture(scope="session")
def catalog_sources() -> dict[Locale, bytes]:
    """Compiled .mo bytes for EN_GB, FR_FR and RU_RU."""
    return default_sources()


@pytest.fixture
def loader(catalog_sources: dict[Locale, bytes]) -> BytesCatalogLoader:
    """Loader with compiled catalogs and DE_DE as the untranslated source locale."""
    return BytesCatalogLoader(catalog_sources, source_locales=frozenset({Locale.DE_DE}))


@pytest.fixture
def registry(loader: BytesCatalogLoader) -> CatalogRegistry:
    """Registry over the default catalogs with DE_DE as fallback.

    ES_ES, IT_IT and PT_PT have no catalog and resolve to DE_DE.
    """
    return CatalogRegistry.build(loader, fallback=Locale.DE_DE)
