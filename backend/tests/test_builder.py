from __future__ import annotations

import pytest

from patternkit.builder import BuildState, Director, StepBuilder
from patternkit.builders import BUILDERS, get as get_builder
from patternkit.builders.computer import (
  COMPUTER_DIRECTOR,
  COMPUTER_STEPS,
  BareboneComputerBuilder,
  Computer,
  ComputerBuilder,
  GamingComputerBuilder,
  OfficeComputerBuilder,
)
from patternkit.catalog import build_computer
from patternkit.errors import UnknownKey, UnsupportedOperation


class RecordingBuilder(ComputerBuilder):
  def __init__(self) -> None:
    super().__init__()
    self.calls: list[str] = []

  def build_cpu(self) -> None:
    self.calls.append("build_cpu")

  def build_gpu(self) -> None:
    self.calls.append("build_gpu")

  def build_storage(self) -> None:
    self.calls.append("build_storage")

  def build_ram(self) -> None:
    self.calls.append("build_ram")


def test_gaming_builder():
  computer = COMPUTER_DIRECTOR.construct(GamingComputerBuilder())
  assert computer.model_dump() == {
    "cpu": "Intel Core i9",
    "gpu": "NVIDIA RTX 3080",
    "ram": "32 GB DDR5",
    "storage": "1 TB SSD",
  }


def test_office_builder():
  computer = COMPUTER_DIRECTOR.construct(OfficeComputerBuilder())
  assert computer == Computer(cpu="Intel Core i5", gpu="Integrated Graphics", ram="16GB DDR4", storage="512GB SSD")


def test_skipped_steps_leave_defaults():
  builder = BareboneComputerBuilder()
  computer = COMPUTER_DIRECTOR.construct(builder)
  assert computer.cpu == "Intel Core i3"
  assert computer.ram == "8GB DDR4"
  assert computer.gpu == ""
  assert computer.storage == ""
  # every step still ran, so the session is complete
  assert builder.state is BuildState.COMPLETE


def test_director_order_is_fixed():
  builder = RecordingBuilder()
  COMPUTER_DIRECTOR.construct(builder)
  assert builder.calls == ["build_cpu", "build_gpu", "build_storage", "build_ram"]
  assert builder.completed == list(COMPUTER_STEPS)


def test_last_write_wins():
  builder = GamingComputerBuilder()
  builder.run_step("build_cpu")
  builder.product.cpu = "AMD Ryzen 9"
  assert builder.get_product().cpu == "AMD Ryzen 9"
  builder.run_step("build_cpu")
  assert builder.get_product().cpu == "Intel Core i9"


def test_state_transitions_and_partial_product():
  builder = OfficeComputerBuilder()
  assert builder.state is BuildState.EMPTY
  builder.run_step("build_cpu")
  assert builder.state is BuildState.PARTIAL
  partial = builder.get_product()
  assert partial.cpu == "Intel Core i5"
  assert partial.gpu == ""
  COMPUTER_DIRECTOR.construct(builder)
  assert builder.state is BuildState.COMPLETE


def test_unknown_step_is_unsupported():
  director = Director(COMPUTER_STEPS + ("build_case",))
  with pytest.raises(UnsupportedOperation):
    director.construct(GamingComputerBuilder())


def test_builder_registry():
  assert set(BUILDERS.keys()) >= {"Gaming", "Office", "Barebone"}
  assert get_builder("Office") is OfficeComputerBuilder
  assert build_computer("Gaming").gpu == "NVIDIA RTX 3080"
  with pytest.raises(UnknownKey):
    build_computer("Server")


def test_describe_lines():
  lines = build_computer("Office").describe()
  assert lines == ["CPU: Intel Core i5", "RAM: 16GB DDR4", "Storage 512GB SSD", "GPU: Integrated Graphics"]


def test_steps_run_by_hand_stay_partial():
  builder = GamingComputerBuilder()
  for step in COMPUTER_STEPS:
    builder.run_step(step)
  assert builder.get_product().gpu == "NVIDIA RTX 3080"
  assert builder.state is BuildState.PARTIAL
  COMPUTER_DIRECTOR.construct(builder)
  assert builder.state is BuildState.COMPLETE


def test_short_director_does_not_complete():
  builder = OfficeComputerBuilder()
  Director(("build_cpu", "build_ram")).construct(builder)
  assert builder.directed
  assert builder.state is BuildState.PARTIAL


def test_builder_without_product_cannot_be_created():
  class NoProductBuilder(StepBuilder):
    steps = ("build_cpu",)

  with pytest.raises(TypeError):
    NoProductBuilder()
