from nmigen import Elaboratable, Module
from nmigen import Mux

from mdu.gateware.interfaces import Request, Response
from mdu.gateware.decoder import Decoder
from mdu.gateware.multiplier import Multiplier
from mdu.gateware.divider import Divider
from mdu.common import opcodes
from mdu.common.logger import logger

class MDU(Elaboratable):

    def __init__(self, WIDTH=32):
        """
        Multiply/Divide Unit.

        A request is presented on ``request`` for a cycle with
        ``valid`` high. Multiplies are always accepted; divides
        and remainders only while the divider is neither busy
        nor presenting a result, so the caller must hold the
        request until ``response.busy`` drops.

        ``response.ready`` pulses for exactly one cycle per
        accepted request, ``latency(op)`` cycles after it was
        accepted, with ``response.result`` valid on that cycle.
        """
        if WIDTH < 1:
            raise ValueError(f"WIDTH = {WIDTH} invalid, must be at least 1")
        self.WIDTH = WIDTH

        self.request = Request(WIDTH, name="request")
        self.response = Response(WIDTH, name="response")

        # submodules
        self.decoder = Decoder()
        self.multiplier = Multiplier(WIDTH=WIDTH)
        self.divider = Divider(WIDTH=WIDTH)

    def elaborate(self, platform):
        m = Module()

        logger.debug(f"elaborating MDU, WIDTH={self.WIDTH}")

        m.submodules.decoder = decoder = self.decoder
        m.submodules.multiplier = mul = self.multiplier
        m.submodules.divider = div = self.divider

        request = self.request
        response = self.response

        m.d.comb += decoder.op.eq(request.op)

        m.d.comb += [
            mul.a.eq(request.a),
            mul.b.eq(request.b),
            mul.a_signed.eq(decoder.a_signed),
            mul.b_signed.eq(decoder.b_signed),
            mul.high.eq(decoder.is_mulh),
            mul.en.eq(request.valid & decoder.is_mul),
        ]

        m.d.comb += [
            div.a.eq(request.a),
            div.b.eq(request.b),
            div.rem.eq(decoder.is_rem),
            div.unsigned.eq(decoder.unsigned),
            div.en.eq(request.valid & decoder.is_divrem),
        ]

        m.d.comb += [
            response.ready.eq(mul.done | div.ready),
            response.result.eq(Mux(mul.done, mul.result, div.result)),
            response.busy.eq(div.busy),
        ]

        return m

    def latency(self, op):
        """cycles from acceptance of ``op`` to its ready pulse"""
        return opcodes.latency(op, self.WIDTH)

    def ports(self):
        ports = []
        ports += [self.request[sig] for sig in self.request.fields]
        ports += [self.response[sig] for sig in self.response.fields]
        return ports

if __name__ == "__main__":
    from mdu.common.config import width
    top = MDU(WIDTH=width)

    # generate verilog
    from nmigen.back import verilog
    f = open(f"mdu_{width}.v", "w")
    f.write(verilog.convert(top,
        name = "mdu",
        strip_internal_attrs=True,
        ports=top.ports()
        ))
