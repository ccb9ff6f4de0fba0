"""
Golden model of the MDU results.

Every function takes the raw operand bit patterns
(unsigned python ints on ``width`` bits) and returns
the raw result bit pattern, exactly as the gateware
presents it on ``response.result``.

Division rounds toward zero. Dividing by zero and
the signed overflow case (MIN / -1) return the
values the RISC-V M extension defines instead of
trapping.
"""

from mdu.common.helpers import to_signed, to_unsigned
from mdu.common.opcodes import Funct3

def mul(a, b, width):
    return to_unsigned(to_signed(a, width) * to_signed(b, width), width)

def mulh(a, b, width):
    product = to_signed(a, width) * to_signed(b, width)
    return to_unsigned(product >> width, width)

def mulhsu(a, b, width):
    product = to_signed(a, width) * to_unsigned(b, width)
    return to_unsigned(product >> width, width)

def mulhu(a, b, width):
    product = to_unsigned(a, width) * to_unsigned(b, width)
    return to_unsigned(product >> width, width)

def _signed_divmod(a, b, width):
    n = to_signed(a, width)
    d = to_signed(b, width)

    if d == 0:
        return -1, n

    q = abs(n) // abs(d)
    if (n < 0) != (d < 0):
        q = -q
    r = n - (d * q)
    # MIN / -1 overflows to MIN once wrapped
    return q, r

def _unsigned_divmod(a, b, width):
    n = to_unsigned(a, width)
    d = to_unsigned(b, width)

    if d == 0:
        return (1 << width) - 1, n

    return n // d, n % d

def div(a, b, width):
    return to_unsigned(_signed_divmod(a, b, width)[0], width)

def divu(a, b, width):
    return to_unsigned(_unsigned_divmod(a, b, width)[0], width)

def rem(a, b, width):
    return to_unsigned(_signed_divmod(a, b, width)[1], width)

def remu(a, b, width):
    return to_unsigned(_unsigned_divmod(a, b, width)[1], width)

_ops = {
    Funct3.mul: mul,
    Funct3.mulh: mulh,
    Funct3.mulhsu: mulhsu,
    Funct3.mulhu: mulhu,
    Funct3.div: div,
    Funct3.divu: divu,
    Funct3.rem: rem,
    Funct3.remu: remu,
}

def compute(op, a, b, width=32):
    """
    result of opcode ``op`` applied to ``a`` and ``b``.
    negative operands are wrapped onto ``width`` bits first.
    """
    if width < 1:
        raise ValueError(f"width = {width} invalid, must be at least 1")
    try:
        fn = _ops[Funct3(op)]
    except ValueError:
        raise ValueError(f"opcode {op} is not a valid 3 bit MDU opcode")
    return fn(to_unsigned(a, width), to_unsigned(b, width), width)
