"""Generation presets for repeatable test runs.

Presets follow the tier system:

* **L1** single landing page, no auth, no admin;
* **L2** multi-page brochure site, no auth;
* **L3** brochure plus user accounts and a member dashboard;
* **L4** full platform with payments and an admin dashboard.

The catalogue ships as ``sitegen/data/presets.json`` in the camelCase wire
format; :func:`load_presets` reads that file or any other in the same shape.
"""

from __future__ import annotations

import json
import threading
import time
from pathlib import Path

from sitegen.errors import PresetValidationError
from sitegen.models import GenerationPreset
from sitegen.utils import to_base36

DEFAULT_PRESETS_PATH = Path(__file__).parent / "data" / "presets.json"

# Length of the time-derived suffix appended to artifact names.
TEST_NAME_SUFFIX_LENGTH = 6


def load_presets(path: str | Path = DEFAULT_PRESETS_PATH) -> dict[str, GenerationPreset]:
    """Load a ``{preset_id: preset}`` JSON file.

    The preset id is the object key; an ``id`` inside the object is ignored.

    Raises:
        pydantic.ValidationError: If an entry does not match the preset shape.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return {
        preset_id: GenerationPreset.model_validate({**body, "id": preset_id})
        for preset_id, body in raw.items()
    }


PRESETS: dict[str, GenerationPreset] = load_presets()

TEST_CATEGORIES: dict[str, list[str]] = {
    "L1 - Landing Pages": ["pizza-L1", "salon-L1", "saas-L1", "fitness-L1"],
    "L2 - Brochure Sites": ["pizza-L2", "salon-L2", "restaurant-L2", "agency-L2"],
    "L3 - With Auth": ["pizza-L3", "ecommerce-L3", "fitness-L3", "saas-L3"],
    "L4 - Full Platform": ["pizza-L4", "ecommerce-L4", "saas-L4", "restaurant-L4"],
    "Assemble Tests": ["quickstart-L1", "assemble-L2", "assemble-L4"],
    "AI Detection Tests": ["orchestrate-pizza", "orchestrate-saas"],
}


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def get_preset(preset_id: str, presets: dict[str, GenerationPreset] | None = None) -> GenerationPreset:
    """Return a copy of *preset_id* so callers may tag it freely.

    Raises:
        PresetValidationError: If the id is unknown.
    """
    catalogue = PRESETS if presets is None else presets
    try:
        preset = catalogue[preset_id]
    except KeyError:
        raise PresetValidationError(preset_id) from None
    return preset.model_copy(deep=True)


def get_all_presets(presets: dict[str, GenerationPreset] | None = None) -> list[GenerationPreset]:
    catalogue = PRESETS if presets is None else presets
    return list(catalogue.values())


def get_presets_by_tier(tier: str | None, presets: dict[str, GenerationPreset] | None = None) -> list[GenerationPreset]:
    return [p for p in get_all_presets(presets) if p.tier == tier]


def get_presets_by_mode(mode: str, presets: dict[str, GenerationPreset] | None = None) -> list[GenerationPreset]:
    return [p for p in get_all_presets(presets) if p.mode == mode]


def get_available_presets(presets: dict[str, GenerationPreset] | None = None) -> list[dict[str, str | None]]:
    """Summaries for listing: id, name, mode, tier, industry, description."""
    return [
        {
            "id": p.id,
            "name": p.name,
            "mode": p.mode,
            "tier": p.tier,
            "industry": p.industry,
            "description": p.description,
        }
        for p in get_all_presets(presets)
    ]


# ---------------------------------------------------------------------------
# Artifact naming
# ---------------------------------------------------------------------------

_name_lock = threading.Lock()
_last_stamp_ms = 0


def generate_test_name(base_name: str) -> str:
    """Return ``{base_name}-{suffix}`` with a short base-36 time-derived suffix.

    The underlying millisecond stamp strictly increases within the process,
    so two calls never share a suffix even when made in the same millisecond.
    """
    global _last_stamp_ms
    with _name_lock:
        stamp = max(time.time_ns() // 1_000_000, _last_stamp_ms + 1)
        _last_stamp_ms = stamp
    suffix = to_base36(stamp)[-TEST_NAME_SUFFIX_LENGTH:]
    return f"{base_name}-{suffix}"
