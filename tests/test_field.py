from cronfield import AboveMax, BelowMin, CronField, FieldKind, NIL, descriptor_for, minutes


def new_field(kind=FieldKind.MINUTE):
    return CronField(descriptor_for(kind))


def test_accumulate_whole_domain():
    field = new_field(FieldKind.DAY)
    result = field.accumulate(NIL, NIL, 1)
    assert result.success
    assert result.value is field
    assert len(field) == 31
    assert field.first() == 1
    assert field.last() == 31


def test_accumulate_whole_domain_stepped():
    field = new_field(FieldKind.DAY)
    assert field.accumulate(NIL, NIL, 10).success
    assert list(field) == [1, 11, 21, 31]
    assert field.first() == 1
    assert field.last() == 31


def test_accumulate_single_value():
    field = new_field()
    assert field.accumulate(42, 42, 1).success
    assert list(field) == [42]
    assert (field.first(), field.last()) == (42, 42)


def test_accumulate_tracks_last_touched_value():
    field = new_field()
    assert field.accumulate(0, 59, 25).success
    assert list(field) == [0, 25, 50]
    assert field.last() == 50


def test_accumulate_swaps_and_defaults_negative_endpoints():
    field = new_field(FieldKind.HOUR)
    assert field.accumulate(10, 8, 1).success
    assert list(field) == [8, 9, 10]

    field = new_field(FieldKind.HOUR)
    assert field.accumulate(20, NIL, 1).success
    # swapped first, so the open end becomes the start
    assert list(field) == list(range(0, 21))


def test_accumulate_failure_has_no_side_effects():
    field = new_field(FieldKind.DAY)
    assert field.accumulate(3, 3, 1).success

    below = field.accumulate(0, 0, 1)
    assert not below.success
    assert isinstance(below.error, BelowMin)

    above = field.accumulate(5, 40, 1)
    assert not above.success
    assert isinstance(above.error, AboveMax)
    assert above.error.value == 40

    assert list(field) == [3]
    assert (field.first(), field.last()) == (3, 3)


def test_contains_outside_domain_is_false():
    field = minutes("*")
    assert field.contains(0)
    assert not field.contains(-1)
    assert not field.contains(60)
    assert 30 in field
    assert "30" not in field


def test_equality_by_kind_and_members():
    assert minutes("0-2") == minutes("0,1,2")
    assert minutes("0-2") != minutes("0-3")
    assert minutes("1") != CronField.parse(FieldKind.HOUR, "1")


def test_query_leaves_field_unchanged():
    field = minutes("5,10")
    before = list(field)
    field.next(0)
    field.prev(59)
    field.format(use_names=True)
    assert list(field) == before
