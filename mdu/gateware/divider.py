"""
Restoring divider over a single combined register.

Layout of ``acc`` (2*WIDTH + 1 bits) while dividing,
after k of WIDTH steps:

    +-----------------+----------------------+-----+-----------+
    | partial rem (W) | dividend bits left   | pad | quotient  |
    +-----------------+----------------------+-----+-----------+
     2W            W+1                        k     k-1        0

Each step subtracts the divisor from the W+1 bit window
``acc[W:2W+1]``. On success the difference replaces the
window and a 1 is shifted in, otherwise the window is kept
and a 0 is shifted in. After WIDTH steps the quotient sits
in ``acc[:W]`` and the remainder in ``acc[W+1:]``, the pad
bit having been pushed up to bit W.

Timing, counted in cycles after the request was accepted:

    cycle 0         IDLE     valid seen, operands normalised and loaded
    cycle 1..W      ITERATE  busy, one quotient bit per edge
    cycle W+1       DONE     ready, result valid
    cycle W+2       IDLE

generate the verilog with
$ python3 divider.py
"""
from nmigen import Elaboratable, Signal, Module
from nmigen import Cat, Mux, Const

from mdu.common.logger import logger

class Divider(Elaboratable):
    def __init__(self, WIDTH=32):
        if WIDTH < 1:
            raise ValueError(f"WIDTH = {WIDTH} invalid, must be at least 1")
        self.WIDTH = WIDTH

        # inputs
        self.a = Signal(WIDTH)
        self.b = Signal(WIDTH)
        self.en = Signal()
        self.rem = Signal()
        self.unsigned = Signal()

        # outputs
        self.accept = Signal()
        self.busy = Signal()
        self.ready = Signal()
        self.result = Signal(WIDTH)

        # exposed internals
        self.timer = Signal(range(WIDTH + 1), reset=WIDTH)
        self.acc = Signal(2 * WIDTH + 1)
        self.divisor = Signal(WIDTH)
        self.negative = Signal()

    def elaborate(self, platform):
        m = Module()
        W = self.WIDTH

        logger.debug(f"elaborating divider, WIDTH={W}")

        acc = self.acc
        divisor = self.divisor
        timer = self.timer
        negative = self.negative
        rem = Signal()

        # sign normalisation, wrapping: |MIN| stays MIN
        signed_op = ~self.unsigned
        a_negative = Signal()
        b_negative = Signal()
        dividend_abs = Signal(W)
        divisor_abs = Signal(W)
        m.d.comb += [
            a_negative.eq(signed_op & self.a[-1]),
            b_negative.eq(signed_op & self.b[-1]),
            dividend_abs.eq(Mux(a_negative, -self.a, self.a)),
            divisor_abs.eq(Mux(b_negative, -self.b, self.b)),
        ]

        # remainder follows the dividend. quotient flips on
        # a sign mismatch, but not for a zero divisor, whose
        # quotient must stay all ones
        result_negative = Signal()
        with m.If(self.rem):
            m.d.comb += result_negative.eq(a_negative)
        with m.Else():
            m.d.comb += result_negative.eq(
                (a_negative ^ b_negative) & (self.b != 0))

        m.d.comb += self.accept.eq(self.en & ~self.busy & ~self.ready)

        window = acc[W:]
        difference = Signal(W + 1)
        m.d.comb += difference.eq(window - divisor)

        with m.FSM(name="divider_fsm") as fsm:
            with m.State("IDLE"):
                with m.If(self.accept):
                    m.d.sync += [
                        acc.eq(Cat(Const(0, 1), dividend_abs)),
                        divisor.eq(divisor_abs),
                        negative.eq(result_negative),
                        rem.eq(self.rem),
                        timer.eq(W),
                    ]
                    m.next = "ITERATE"

            with m.State("ITERATE"):
                m.d.sync += timer.eq(timer - 1)

                # borrow out of the window means the divisor did not fit
                with m.If(difference[W]):
                    m.d.sync += acc.eq(Cat(Const(0, 1), acc[:W], window[:W]))
                with m.Else():
                    m.d.sync += acc.eq(Cat(Const(1, 1), acc[:W], difference[:W]))

                with m.If(timer == 1):
                    m.next = "DONE"

            with m.State("DONE"):
                m.next = "IDLE"

        m.d.comb += [
            self.busy.eq(fsm.ongoing("ITERATE")),
            self.ready.eq(fsm.ongoing("DONE")),
        ]

        quotient = acc[:W]
        remainder = acc[W + 1:]
        magnitude = Signal(W)
        m.d.comb += magnitude.eq(Mux(rem, remainder, quotient))
        m.d.comb += self.result.eq(Mux(negative, -magnitude, magnitude))

        return m

    def ports(self):
        return [self.a, self.b, self.en, self.rem, self.unsigned,
                self.accept, self.busy, self.ready, self.result]

if __name__ == "__main__":
    top = Divider(WIDTH=32)

    # generate verilog
    from nmigen.back import verilog
    name = __file__[:-3]
    f = open(f"{name}.v", "w")
    f.write(verilog.convert(top,
        name = "divider",
        strip_internal_attrs=True,
        ports=top.ports()
        ))
