import pytest

from holani.bus import Bus, BusStatus


def test_new_bus_defaults():
    bus = Bus()
    assert bus.data == 0
    assert bus.addr == 0
    assert bus.status is BusStatus.NONE
    assert bus.request is False
    assert bus.grant is True


def test_default_repr():
    assert repr(Bus()) == "{ addr:0000 data:0000 status:None request:false grant:true }"


def test_repr_reflects_fields():
    bus = Bus(data=0xAB, addr=0xFC00, status=BusStatus.PEEK_CART0, request=True, grant=False)
    text = repr(bus)
    assert "addr:fc00" in text
    assert "data:00ab" in text
    assert "status:PeekCart0" in text
    assert "request:true" in text
    assert "grant:false" in text


def test_fields_are_mutable():
    bus = Bus()
    bus.addr = 0xFFFE
    bus.data = 0x42
    bus.status = BusStatus.POKE_CORE
    bus.request = True
    bus.grant = False
    assert (bus.addr, bus.data, bus.status, bus.request, bus.grant) == (
        0xFFFE,
        0x42,
        BusStatus.POKE_CORE,
        True,
        False,
    )


def test_buses_are_independent():
    first = Bus()
    second = Bus()
    first.status = BusStatus.PEEK
    assert second.status is BusStatus.NONE
    assert first != second


def test_equality_by_value():
    built = Bus(data=1, addr=2)
    assigned = Bus()
    assigned.data = 1
    assigned.addr = 2
    assert (built.data, built.addr) == (1, 2)
    assert built == assigned
    assert repr(built) == repr(assigned)


@pytest.mark.parametrize("status", list(BusStatus))
def test_status_name_in_repr(status):
    assert f"status:{status.value} " in repr(Bus(status=status))


def test_status_lookup_by_value():
    assert BusStatus("PeekRAM") is BusStatus.PEEK_RAM
    with pytest.raises(ValueError):
        BusStatus("Unknown")


def test_every_status_gives_distinct_repr():
    reprs = {repr(Bus(status=status)) for status in BusStatus}
    assert len(reprs) == 14