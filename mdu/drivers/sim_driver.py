"""
Cycle accurate simulation harness for the MDU.

The generator methods (``step``, ``issue``, ``wait_ready``,
``reset``) are meant to be used from inside a simulator
process:

    def process():
        yield from driver.issue(Funct3.div, 7, 2)
        value = yield from driver.wait_ready()

The plain methods (``execute``, ``execute_many``,
``reset_now``) add such a process and run the simulator
until it finishes.
"""

import logging
from collections import namedtuple

from nmigen import Module, ClockDomain
from nmigen.sim import Simulator, Settle, Tick

from mdu.gateware.top import MDU
from mdu.common import config
from mdu.common import reference
from mdu.common.opcodes import Funct3, is_div_class, div_latency
from mdu.common.helpers import to_unsigned, print_sig
from mdu.common.logger import logger, LogIndent, LogCycle

Result = namedtuple("Result", ["value", "latency"])

clock_period = 1e-6

class SimDriver():
    def __init__(self, width=None, check=None, vcd=None):
        if width is None:
            width = config.width
        if check is None:
            check = config.check
        if vcd is None:
            vcd = config.vcd

        self.width = width
        self.check = (check == 'on')
        self.cycle = 0

        self.mdu = mdu = MDU(WIDTH=width)
        dut = Module()
        dut.domains.sync = self.cd_sync = ClockDomain("sync")
        dut.submodules.mdu = mdu

        self.sim = sim = Simulator(dut)
        sim.add_clock(clock_period, domain="sync")

        self.write_object = None
        if vcd == 'on':
            self.write_object = sim.write_vcd(f"{__file__[:-3]}_{width}.vcd")
            self.write_object.__enter__()

        logger.debug(f"SimDriver ready, WIDTH={width}, check={check}")

    def close(self):
        if self.write_object is not None:
            self.write_object.__exit__(None, None, None)
            self.write_object = None

    def validate(self, op, a, b):
        try:
            Funct3(op)
        except ValueError:
            raise ValueError(f"opcode {op} is not a valid 3 bit MDU opcode")

        low = -(2 ** (self.width - 1))
        high = 2 ** self.width
        for name, value in (('a', a), ('b', b)):
            if not (low <= value < high):
                raise ValueError(
                    f"operand {name} = {value} does not fit in " +
                    f"{self.width} bits, must be on [{low}, {high})")

    def step(self):
        yield Tick()
        yield Settle()
        self.cycle += 1
        LogCycle.cycle = self.cycle

    def issue(self, op, a, b):
        """
        drives a request and holds it until the MDU
        accepts it. returns the cycle of acceptance and
        leaves the driver one cycle later with ``valid``
        low again.
        """
        self.validate(op, a, b)
        request = self.mdu.request

        yield request.op.eq(op)
        yield request.a.eq(to_unsigned(a, self.width))
        yield request.b.eq(to_unsigned(b, self.width))
        yield request.valid.eq(1)
        yield Settle()

        if is_div_class(op):
            while not (yield self.mdu.divider.accept):
                yield from self.step()

        accepted = self.cycle
        logger.debug(f"accepted {Funct3(op).name} a={a:#x} b={b:#x}")

        yield from self.step()
        yield request.valid.eq(0)
        yield Settle()

        return accepted

    def wait_ready(self, limit=None):
        """
        steps until ``response.ready`` is seen and returns
        the result on that cycle. raises ``TimeoutError``
        after ``limit`` cycles.
        """
        if limit is None:
            limit = div_latency(self.width)

        start = self.cycle
        with LogIndent():
            while not (yield self.mdu.response.ready):
                if (self.cycle - start) >= limit:
                    raise TimeoutError(
                        f"no ready pulse within {limit} cycles")
                if logger.isEnabledFor(logging.DEBUG):
                    yield from self.dump_state()
                yield from self.step()

        value = yield self.mdu.response.result
        logger.debug(f"ready, result={value:#x}")
        return value

    def reset(self):
        yield self.cd_sync.rst.eq(1)
        yield from self.step()
        yield self.cd_sync.rst.eq(0)
        yield Settle()
        logger.debug("reset")

    def dump_state(self):
        # to use in simulation, do
        # yield from driver.dump_state()
        divider = self.mdu.divider
        yield from print_sig(divider.timer, newline=False)
        yield from print_sig(divider.acc, format=hex, newline=False)
        yield from print_sig(self.mdu.response.busy, newline=True)

    def compare(self, op, a, b, value):
        expected = reference.compute(op, a, b, self.width)
        if value != expected:
            logger.error(
                f"{Funct3(op).name}({a:#x}, {b:#x}) = {value:#x}, " +
                f"expected {expected:#x}")
            raise AssertionError(
                f"{Funct3(op).name} mismatch: {value:#x} != {expected:#x}")

    def execute_many(self, requests):
        """
        runs ``requests``, a list of ``(op, a, b)``, one
        after the other and returns a ``Result`` for each.
        """
        requests = list(requests)
        for op, a, b in requests:
            self.validate(op, a, b)

        results = []
        def process():
            for op, a, b in requests:
                accepted = yield from self.issue(op, a, b)
                value = yield from self.wait_ready()
                results.append(Result(value, self.cycle - accepted))
                if self.check:
                    self.compare(op, a, b, value)

        self.sim.add_sync_process(process)
        self.sim.run()
        return results

    def execute(self, op, a, b):
        return self.execute_many([(op, a, b)])[0]

    def reset_now(self):
        def process():
            yield from self.reset()

        self.sim.add_sync_process(process)
        self.sim.run()

if __name__ == "__main__":
    from sys import argv
    driver = SimDriver()
    op, a, b = Funct3[argv[1]], int(argv[2], 0), int(argv[3], 0)
    result = driver.execute(op, a, b)
    print(f"{op.name}({a:#x}, {b:#x}) = {result.value:#x} " +
          f"after {result.latency} cycles")
    driver.close()
