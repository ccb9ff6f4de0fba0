"""
Build and simulation options, read from the environment.

    MDU_WIDTH=16 VCD=on python3 -m unittest

Invalid values are reported and replaced with the default.
"""
import os
from termcolor import colored

default_width = 32

def _on_off(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    if value not in {'on', 'off'}:
        print(colored(f"INVALID OPTION!: {name}={value}", 'red'))
        print(colored(f"CHANGE WITH {name}=on or {name}=off", 'blue'))
        print(colored(f"DEFAULTING TO {name}={default}", 'blue'))
        print()
        return default
    return value

def _width(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        width = int(value)
        if width < 1:
            raise ValueError()
    except ValueError:
        print(colored(f"INVALID OPTION!: {name}={value}", 'red'))
        print(colored(f"{name} must be a positive integer", 'blue'))
        print(colored(f"DEFAULTING TO {name}={default}", 'blue'))
        print()
        return default
    return width

# operand width used when none is given explicitly
width = _width('MDU_WIDTH', default_width)

# dump a waveform of every driver simulation
vcd = _on_off('VCD', 'off')

# compare every driver result against the reference model
check = _on_off('CHECK', 'on')
