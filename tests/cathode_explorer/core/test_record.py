import math

from cathode_explorer.core.record import (
    CATEGORIES,
    RECORD_FIELDS,
    Category,
    CompoundRecord,
    is_finite_number,
)


def test_category_parse_accepts_canonical_labels_only():
    assert Category.parse("Oxide") is Category.OXIDE
    assert Category.parse(Category.NITRIDE) is Category.NITRIDE

    # exact match on the label, no case folding
    assert Category.parse("oxide") is None
    assert Category.parse("Carbide") is None
    assert Category.parse(None) is None
    assert Category.parse(float("nan")) is None


def test_categories_have_fixed_order():
    assert [c.value for c in CATEGORIES] == [
        "Sulfide",
        "Oxide",
        "Phosphate",
        "Selenide",
        "Nitride",
        "Fluoride",
        "Chloride",
        "Silicate",
    ]


def test_is_finite_number():
    assert is_finite_number(3)
    assert is_finite_number(3.9)
    assert not is_finite_number(True)
    assert not is_finite_number(None)
    assert not is_finite_number("3.9")
    assert not is_finite_number(math.inf)
    assert not is_finite_number(math.nan)


def test_record_from_mapping_normalises_values():
    rec = CompoundRecord.from_mapping(
        {
            "id": 7,
            "formula": "LiTiS2",
            "base_formula": 12,
            "type": "Sulfide",
            "voltage": 3.9,
            "capacity": float("nan"),
            "cycle_life": 62500,
            "conductivity": "fast",
            "unknown_key": "ignored",
        }
    )

    assert rec.id == 7
    assert rec.formula == "LiTiS2"
    assert rec.base_formula is None
    assert rec.type is Category.SULFIDE
    assert rec.voltage == 3.9
    assert rec.capacity is None
    assert rec.cycle_life == 62500.0
    assert rec.conductivity is None
    assert rec.density is None


def test_record_to_dict_uses_field_order_and_labels():
    rec = CompoundRecord(id=1, formula="LiTiO2", type=Category.OXIDE, voltage=3.4)
    out = rec.to_dict()

    assert tuple(out.keys()) == RECORD_FIELDS
    assert out["type"] == "Oxide"
    assert out["voltage"] == 3.4
    assert out["capacity"] is None
