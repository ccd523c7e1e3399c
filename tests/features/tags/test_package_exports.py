"""tests/features/tags/test_package_exports.py
What: Validate tag packages expose the public facade.
Why: Callers import adapters, records, and dispatch helpers from package roots.
"""

from importlib import import_module


def test_top_level_package_exports() -> None:
    """The top-level package should expose the facade entry points."""

    package = import_module("tagbridge")

    expected_names = {
        "TagDispatcher",
        "TagRecord",
        "TagConfig",
        "TagField",
        "TagType",
        "Picture",
        "MimeType",
        "TagError",
        "UnrepresentableValueError",
        "detect_and_read",
        "convert",
        "to_record",
        "from_record",
    }

    for name in expected_names:
        assert hasattr(package, name), f"Missing export: {name}"


def test_usecases_package_exports() -> None:
    """Use case package should re-export conversion and dispatch helpers."""

    usecases = import_module("tagbridge.features.tags.usecases")

    expected_names = {
        "AudioTagPort",
        "TagDispatcher",
        "apply_record",
        "convert",
        "detect_and_read",
        "from_record",
        "lost_fields",
        "to_record",
    }

    for name in expected_names:
        assert hasattr(usecases, name), f"Missing export: {name}"
