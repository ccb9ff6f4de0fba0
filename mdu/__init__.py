"""
Multiply/Divide Unit gateware for a RISC-V style
integer pipeline, written in nMigen.
"""
