def to_unsigned(value, width):
    """
    wraps a python int onto ``width`` bits,
    two's complement for negative values
    Example:
        >>> to_unsigned(-1, 8)
        255
    """
    return value & ((1 << width) - 1)

def to_signed(value, width):
    """
    reads the low ``width`` bits of a python int
    as a two's complement number
    Example:
        >>> to_signed(0xFF, 8)
        -1
    """
    value = to_unsigned(value, width)
    if value >> (width - 1):
        return value - (1 << width)
    return value

def print_sig(sig, format=None, newline=True):
    """
    allows easy intelligent printing
    of a signal during simulation
    Example:
        >>> yield from print_sig(mysig)
        (sig mysig) = 1
    """

    if format == None:
        print(f"{sig.__repr__()} = {(yield sig)}", end='\t')
    else:
        print(f"{sig.__repr__()} = {format((yield sig))}", end='\t')

    if newline:
        print()
