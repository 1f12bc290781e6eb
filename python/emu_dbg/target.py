"""Minimal simulated machine used as the console's default debug target."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Set

WORD_MASK = 0xFFFF
HALT_WORD = 0o000000


class Register(enum.Enum):
    AC = "ac"
    PC = "pc"
    LINK = "link"


@dataclass
class SimulatedTarget:
    """Word-addressed 16-bit machine.

    Executing a zero word halts the machine; any other word simply advances
    the program counter.  That is enough to drive stepping, running and
    breakpoints from the console.
    """

    memory_size: int = 4096
    memory: List[int] = field(init=False, repr=False)
    registers: Dict[Register, int] = field(init=False)
    breakpoints: Set[int] = field(default_factory=set)
    halted: bool = False
    speed: float = 1.0
    cycles: int = 0

    def __post_init__(self) -> None:
        if self.memory_size <= 0:
            raise ValueError("memory size must be positive")
        self.memory = [0] * self.memory_size
        self.registers = {register: 0 for register in Register}

    def contains(self, address: int) -> bool:
        return 0 <= address < self.memory_size

    def read(self, address: int) -> int:
        return self.memory[address]

    def write(self, address: int, value: int) -> None:
        self.memory[address] = value & WORD_MASK

    @property
    def pc(self) -> int:
        return self.registers[Register.PC]

    def set_register(self, register: Register, value: int) -> None:
        if register is Register.LINK:
            value &= 1
        self.registers[register] = value & WORD_MASK

    def reset(self) -> None:
        self.registers = {register: 0 for register in Register}
        self.halted = False
        self.cycles = 0

    def step(self) -> None:
        if self.halted:
            return
        pc = self.pc
        word = self.read(pc) if self.contains(pc) else HALT_WORD
        self.cycles += 1
        if word == HALT_WORD:
            self.halted = True
            return
        self.registers[Register.PC] = (pc + 1) % self.memory_size

    def run(self, max_steps: int = 100_000) -> str:
        """Run until halt, a breakpoint or *max_steps*; return why it stopped."""
        self.halted = False
        for _ in range(max_steps):
            self.step()
            if self.halted:
                return "halted"
            if self.pc in self.breakpoints:
                return f"breakpoint at {self.pc:06o}"
        return f"stopped after {max_steps} steps"

    def format_status(self) -> str:
        state = "halted" if self.halted else "ready"
        return (
            f"PC={self.pc:06o} AC={self.registers[Register.AC]:06o} "
            f"L={self.registers[Register.LINK]} {state}"
        )
