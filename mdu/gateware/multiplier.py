"""
generate the verilog with
$ python3 multiplier.py
"""
from nmigen import Elaboratable, Signal, Module
from nmigen import Cat, Mux, signed

from mdu.common.logger import logger

class Multiplier(Elaboratable):
    def __init__(self, WIDTH=32):
        """
        Single cycle multiplier with a registered product.

        Both operands are widened by one bit, sign or zero
        extended as selected by ``a_signed`` and ``b_signed``,
        so one signed multiply covers mul, mulh, mulhsu and
        mulhu.

        ``done`` rises the cycle after ``en`` was high and
        stays up for exactly one cycle. ``high`` is captured
        along with the product so the word reported does not
        depend on the opcode presented afterwards.
        """
        if WIDTH < 1:
            raise ValueError(f"WIDTH = {WIDTH} invalid, must be at least 1")
        self.WIDTH = WIDTH

        # inputs
        self.a = Signal(WIDTH)
        self.b = Signal(WIDTH)
        self.a_signed = Signal()
        self.b_signed = Signal()
        self.high = Signal()
        self.en = Signal()

        # outputs
        self.done = Signal()
        self.result = Signal(WIDTH)

        # exposed internals
        self.product = Signal(2 * WIDTH)

    def elaborate(self, platform):
        m = Module()
        W = self.WIDTH

        logger.debug(f"elaborating multiplier, WIDTH={W}")

        a_wide = Signal(signed(W + 1))
        b_wide = Signal(signed(W + 1))
        m.d.comb += [
            a_wide.eq(Cat(self.a, self.a_signed & self.a[-1])),
            b_wide.eq(Cat(self.b, self.b_signed & self.b[-1])),
        ]

        product = self.product
        high = Signal()

        with m.If(self.en):
            m.d.sync += [
                product.eq(a_wide * b_wide),
                high.eq(self.high),
            ]

        # handshake shadow, latched every cycle
        m.d.sync += self.done.eq(self.en)

        m.d.comb += self.result.eq(Mux(high, product[W:], product[:W]))

        return m

    def ports(self):
        return [self.a, self.b,
                self.a_signed, self.b_signed,
                self.high, self.en,
                self.done, self.result]

if __name__ == "__main__":
    top = Multiplier(WIDTH=32)

    # generate verilog
    from nmigen.back import verilog
    name = __file__[:-3]
    f = open(f"{name}.v", "w")
    f.write(verilog.convert(top,
        name = "multiplier",
        strip_internal_attrs=True,
        ports=top.ports()
        ))
