"""Fold a frozen pin table into LPC17xx GPIO register init values.

Each pass owns one register family and reads nothing but the pin table,
so the passes can run in any order. Two pins on the same port/bit are not
detected; the later one in table order wins.
"""
from typing import Iterable, List, Sequence, Tuple

from .errors import SpecError
from .models import DIR_IN, DIR_OUT, NUM_PAIR_REGS, NUM_PORTS, UNSET, PinEntry, RegisterImages

MASK32 = 0xFFFFFFFF


def _check(pe: PinEntry):
    if not (0 <= pe.port < NUM_PORTS) or not (0 <= pe.bit < 32):
        raise SpecError("R301", {"signal": pe.signal_name, "port": pe.port, "bit": pe.bit})


def pair_slot(port: int, bit: int) -> Tuple[int, int]:
    """(register index, shift) of a pin's 2-bit field in PINSEL/PINMODE."""
    if bit < 16:
        return port * 2, 2 * bit
    return port * 2 + 1, 2 * (bit - 16)


def _put_pair(regs: List[int], pe: PinEntry, value: int):
    reg, sh = pair_slot(pe.port, pe.bit)
    regs[reg] &= ~(0x3 << sh) & MASK32
    regs[reg] |= (value & 0x3) << sh


def _put_bit(regs: List[int], pe: PinEntry, on: bool):
    if on:
        regs[pe.port] |= 1 << pe.bit
    else:
        regs[pe.port] &= ~(1 << pe.bit) & MASK32


def calc_pinsel(pins: Iterable[PinEntry]) -> Tuple[int, ...]:
    regs = [0] * NUM_PAIR_REGS
    for pe in pins:
        _check(pe)
        _put_pair(regs, pe, UNSET if pe.function_select is None else pe.function_select)
    return tuple(regs)


def calc_pinmode(pins: Iterable[PinEntry]) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    regs = [0] * NUM_PAIR_REGS
    od = [0] * NUM_PORTS
    for pe in pins:
        _check(pe)
        _put_pair(regs, pe, pe.mode)
        _put_bit(od, pe, pe.open_drain)
    return tuple(regs), tuple(od)


def calc_fiodir(pins: Iterable[PinEntry]) -> Tuple[int, ...]:
    # FIODIR: 1 = output, 0 = input
    regs = [0] * NUM_PORTS
    for pe in pins:
        _check(pe)
        if pe.direction == DIR_OUT:
            _put_bit(regs, pe, True)
        elif pe.direction == DIR_IN:
            _put_bit(regs, pe, False)
    return tuple(regs)


def calc_fiopin(pins: Iterable[PinEntry]) -> Tuple[int, ...]:
    regs = [0] * NUM_PORTS
    for pe in pins:
        _check(pe)
        _put_bit(regs, pe, pe.default_state)
    return tuple(regs)


def calc_fiomask(pins: Iterable[PinEntry]) -> Tuple[int, ...]:
    # everything masked except pins routed to the GPIO function (0)
    regs = [MASK32] * NUM_PORTS
    for pe in pins:
        _check(pe)
        if pe.function_select == 0:
            _put_bit(regs, pe, False)
    return tuple(regs)


def accumulate(pins: Sequence[PinEntry]) -> RegisterImages:
    pinmode, pinmode_od = calc_pinmode(pins)
    return RegisterImages(
        pinsel=calc_pinsel(pins),
        pinmode=pinmode,
        pinmode_od=pinmode_od,
        fiodir=calc_fiodir(pins),
        fiopin=calc_fiopin(pins),
        fiomask=calc_fiomask(pins),
    )
