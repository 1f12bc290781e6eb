"""Execution control, breakpoint and register commands."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..context import DebuggerContext
from ..output import emit_error, emit_result, render_breakpoints, render_registers
from ..params import f32, symbol, u16, u32
from ..state import ExecutionState
from ..target import Register, SimulatedTarget
from .base import CommandGroup

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry


class ControlCommands(CommandGroup):
    def __init__(self, ctx: DebuggerContext, target: SimulatedTarget) -> None:
        self.ctx = ctx
        self.target = target

    def register(self, registry: "CommandRegistry") -> None:
        registry.add("go", self.go, description="Resumes execution until a breakpoint or halt.")
        registry.add("step", self.step, description="Executes one instruction.")
        registry.add(
            "step",
            self.step_count,
            params=(u32("count"),),
            description="Executes <count> instructions.",
            usage="<count>",
        )
        registry.add("halt", self.halt, description="Halts the target.")
        registry.add("reset", self.reset, description="Resets registers and clears the halt flag.")
        registry.add(
            "set breakpoint",
            self.set_breakpoint,
            params=(u16("address"),),
            description="Sets a breakpoint at the given address.",
            usage="<address>",
        )
        registry.add(
            "clear breakpoint",
            self.clear_breakpoint,
            params=(u16("address"),),
            description="Removes the breakpoint at the given address.",
            usage="<address>",
        )
        registry.add("show breakpoints", self.show_breakpoints, description="Lists breakpoints.")
        registry.add(
            "set register",
            self.set_register,
            params=(symbol(Register, "register"), u16("value")),
            description="Sets a register value.",
            usage="<register> <value>",
        )
        registry.add("show registers", self.show_registers, description="Displays register contents.")
        registry.add(
            "set speed",
            self.set_speed,
            params=(f32("multiplier"),),
            description="Sets the execution speed multiplier.",
            usage="<multiplier>",
        )

    def go(self) -> ExecutionState:
        return ExecutionState.RUNNING

    def step(self) -> ExecutionState:
        return self.step_count(1)

    def step_count(self, count: int) -> ExecutionState:
        for _ in range(count):
            self.target.step()
            if self.target.halted:
                return ExecutionState.HALTED
        return ExecutionState.DEBUGGING

    def halt(self) -> ExecutionState:
        self.target.halted = True
        return ExecutionState.HALTED

    def reset(self) -> ExecutionState:
        self.target.reset()
        return ExecutionState.DEBUGGING

    def set_breakpoint(self, address: int) -> ExecutionState:
        if not self.target.contains(address):
            emit_error(self.ctx, message=f"address {address:06o} is outside memory")
            return ExecutionState.DEBUGGING
        self.target.breakpoints.add(address)
        emit_result(self.ctx, message=f"Breakpoint set at {address:06o}", data={"address": address})
        return ExecutionState.DEBUGGING

    def clear_breakpoint(self, address: int) -> ExecutionState:
        if address not in self.target.breakpoints:
            emit_error(self.ctx, message=f"no breakpoint at {address:06o}")
            return ExecutionState.DEBUGGING
        self.target.breakpoints.discard(address)
        emit_result(self.ctx, message=f"Breakpoint cleared at {address:06o}", data={"address": address})
        return ExecutionState.DEBUGGING

    def show_breakpoints(self) -> ExecutionState:
        render_breakpoints(self.ctx, sorted(self.target.breakpoints))
        return ExecutionState.DEBUGGING

    def set_register(self, register: Register, value: int) -> ExecutionState:
        self.target.set_register(register, value)
        return ExecutionState.DEBUGGING

    def show_registers(self) -> ExecutionState:
        registers = {register.name: value for register, value in self.target.registers.items()}
        render_registers(self.ctx, registers)
        return ExecutionState.DEBUGGING

    def set_speed(self, multiplier: float) -> ExecutionState:
        if not math.isfinite(multiplier) or multiplier <= 0:
            emit_error(self.ctx, message=f"speed multiplier must be a positive finite number, got {multiplier}")
            return ExecutionState.DEBUGGING
        self.target.speed = multiplier
        return ExecutionState.DEBUGGING
