from enum import IntEnum, unique

"""
The 3 bit opcode is the funct3 field of the
RISC-V M extension.

+-----+--------+-------------------------------+
| op  | name   | result                        |
+-----+--------+-------------------------------+
| 000 | mul    | low word, signed x signed     |
| 001 | mulh   | high word, signed x signed    |
| 010 | mulhsu | high word, signed x unsigned  |
| 011 | mulhu  | high word, unsigned x unsigned|
| 100 | div    | signed quotient               |
| 101 | divu   | unsigned quotient             |
| 110 | rem    | signed remainder              |
| 111 | remu   | unsigned remainder            |
+-----+--------+-------------------------------+

bit 2 selects the divide class.
"""

@unique
class Funct3(IntEnum):
    mul = 0b000
    mulh = 0b001
    mulhsu = 0b010
    mulhu = 0b011
    div = 0b100
    divu = 0b101
    rem = 0b110
    remu = 0b111

MUL_OPS = (Funct3.mul, Funct3.mulh, Funct3.mulhsu, Funct3.mulhu)
DIV_OPS = (Funct3.div, Funct3.divu, Funct3.rem, Funct3.remu)

# cycles from acceptance to ready
MUL_LATENCY = 1

def div_latency(width):
    # one setup edge, then one edge per quotient bit
    return width + 1

def is_div_class(op):
    return bool(Funct3(op) & 0b100)

def latency(op, width):
    if is_div_class(op):
        return div_latency(width)
    return MUL_LATENCY
