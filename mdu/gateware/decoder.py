"""
generate the verilog with:
$ python3 decoder.py generate > decoder.v
"""

from nmigen import Elaboratable, Signal, Module

class Decoder(Elaboratable):
    def __init__(self):
        """
        Splits the 3 bit opcode into the control flags
        shared by the multiplier and the divider.
        No state and no latency.
        """
        # inputs
        self.op = Signal(3)

        # outputs
        self.is_mul = Signal()
        self.is_mulh = Signal()
        self.is_div = Signal()
        self.is_rem = Signal()
        self.is_divrem = Signal()
        # divide class only
        self.unsigned = Signal()
        # multiply class only
        self.mixed = Signal()
        self.a_signed = Signal()
        self.b_signed = Signal()

    def elaborate(self, platform):
        m = Module()

        bit0 = self.op[0]
        bit1 = self.op[1]
        bit2 = self.op[2]

        m.d.comb += [
            self.is_mul.eq(~bit2),
            self.is_mulh.eq(~bit2 & (bit1 | bit0)),
            self.is_div.eq(bit2 & ~bit1),
            self.is_rem.eq(bit2 & bit1),
            self.is_divrem.eq(bit2),
            self.unsigned.eq(bit2 & bit0),
            self.mixed.eq(~bit2 & bit1 & ~bit0),
        ]

        # operand widening for the multiplier
        # mul, mulh   : a signed,   b signed
        # mulhsu      : a signed,   b unsigned
        # mulhu       : a unsigned, b unsigned
        m.d.comb += [
            self.a_signed.eq(~(bit1 & bit0)),
            self.b_signed.eq(~bit1),
        ]

        return m

    def ports(self):
        return [self.op,
                self.is_mul,
                self.is_mulh,
                self.is_div,
                self.is_rem,
                self.is_divrem,
                self.unsigned,
                self.mixed,
                self.a_signed,
                self.b_signed]

from nmigen.cli import main
if __name__ == "__main__":
    top = Decoder()
    main(top, ports=top.ports())
