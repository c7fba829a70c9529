import pytest

from cronfield import DESCRIPTORS, FieldDescriptor, FieldKind, InvalidKind, descriptor_for


@pytest.mark.parametrize(
    "kind,low,high",
    [
        (FieldKind.SECOND, 0, 59),
        (FieldKind.MINUTE, 0, 59),
        (FieldKind.HOUR, 0, 23),
        (FieldKind.DAY, 1, 31),
        (FieldKind.MONTH, 1, 12),
        (FieldKind.DAY_OF_WEEK, 0, 6),
    ],
)
def test_domains(kind, low, high):
    d = descriptor_for(kind)
    assert d.kind == kind
    assert d.min_value == low
    assert d.max_value == high
    assert d.value_count == high - low + 1


def test_only_month_and_weekday_have_names():
    named = [d.kind for d in DESCRIPTORS if d.names]
    assert named == [FieldKind.MONTH, FieldKind.DAY_OF_WEEK]
    for d in DESCRIPTORS:
        if d.names:
            assert len(d.names) == d.value_count


def test_lookup_by_ordinal_and_name():
    assert descriptor_for(4).kind == FieldKind.MONTH
    assert descriptor_for("day_of_week").kind == FieldKind.DAY_OF_WEEK
    assert descriptor_for("DayOfWeek").kind == FieldKind.DAY_OF_WEEK
    assert descriptor_for("minute").kind == FieldKind.MINUTE


@pytest.mark.parametrize("bad", [6, -1, "year", None, True, 2.0])
def test_invalid_kind(bad):
    with pytest.raises(InvalidKind) as exc_info:
        descriptor_for(bad)
    assert "DayOfWeek" in str(exc_info.value)
    assert exc_info.value.code == "invalid_kind"


def test_name_lookup_is_case_insensitive_prefix():
    month = descriptor_for(FieldKind.MONTH)
    assert month.lookup_name("jan") == 1
    assert month.lookup_name("DECEMBER") == 12
    assert month.lookup_name("Sept") == 9
    # first match in domain order
    assert month.lookup_name("ju") == 6
    assert month.lookup_name("xyz") is None
    assert descriptor_for(FieldKind.HOUR).lookup_name("mon") is None


def test_descriptor_rejects_misaligned_names():
    with pytest.raises(ValueError):
        FieldDescriptor(FieldKind.MONTH, 1, 12, ("Jan", "Feb"))


def test_descriptor_is_immutable():
    d = descriptor_for(FieldKind.HOUR)
    with pytest.raises(AttributeError):
        d.max_value = 99
