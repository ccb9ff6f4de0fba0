"""
Project wide logger.

Simulation drivers stamp records with the clock cycle
they were emitted on, so a trace reads like a waveform:

    DEBUG: [cycle 12]	divider ready, result=0x3 (sim_driver.py:141)
"""
import logging
import os

class LogIndent():
    indent = "\t"

    def __enter__(self):
        LogIndent.indent += "\t"

    def __exit__(self, type, value, traceback):
        LogIndent.indent = LogIndent.indent[:-1]

class LogCycle():
    """
    Holds the cycle count of the simulation currently
    being driven. ``None`` outside of simulation.
    """
    cycle = None

class AppFilter(logging.Filter):
    def filter(self, record):
        record.indent = LogIndent.indent
        if LogCycle.cycle is None:
            record.cycle = "-"
        else:
            record.cycle = LogCycle.cycle
        return True

class CustomFormatter(logging.Formatter):
    """Logging Formatter to add colors per level"""

    magenta = "\u001b[35m"
    blue = "\u001b[34m"
    yellow = "\x1b[33;21m"
    red = "\x1b[31;21m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    format = "%(levelname)s: [cycle %(cycle)s]%(indent)s%(message)s (%(filename)s:%(lineno)d)"

    FORMATS = {
        logging.DEBUG: magenta + format + reset,
        logging.INFO: blue + format + reset,
        logging.WARNING: yellow + format + reset,
        logging.ERROR: red + format + reset,
        logging.CRITICAL: bold_red + format + reset
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)

logger = logging.getLogger("mdu")
logger.addFilter(AppFilter())

ch = logging.StreamHandler()

# was debug set on terminal?
if os.getenv('DEBUG'):
    logger.setLevel(logging.DEBUG)
    ch.setLevel(logging.DEBUG)

ch.setFormatter(CustomFormatter())
logger.addHandler(ch)
