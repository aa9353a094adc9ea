from __future__ import annotations

from pydantic import BaseModel

from patternkit.builder import Director, StepBuilder

from . import register

COMPUTER_STEPS = ("build_cpu", "build_gpu", "build_storage", "build_ram")


class Computer(BaseModel):
  cpu: str = ""
  gpu: str = ""
  ram: str = ""
  storage: str = ""

  def describe(self) -> list[str]:
    return [
      f"CPU: {self.cpu}",
      f"RAM: {self.ram}",
      f"Storage {self.storage}",
      f"GPU: {self.gpu}",
    ]


class ComputerBuilder(StepBuilder[Computer]):
  steps = COMPUTER_STEPS

  def new_product(self) -> Computer:
    return Computer()

  def build_cpu(self) -> None:
    pass

  def build_gpu(self) -> None:
    pass

  def build_storage(self) -> None:
    pass

  def build_ram(self) -> None:
    pass


class GamingComputerBuilder(ComputerBuilder):
  kind = "Gaming"

  def build_cpu(self) -> None:
    self.product.cpu = "Intel Core i9"

  def build_gpu(self) -> None:
    self.product.gpu = "NVIDIA RTX 3080"

  def build_ram(self) -> None:
    self.product.ram = "32 GB DDR5"

  def build_storage(self) -> None:
    self.product.storage = "1 TB SSD"


class OfficeComputerBuilder(ComputerBuilder):
  kind = "Office"

  def build_cpu(self) -> None:
    self.product.cpu = "Intel Core i5"

  def build_ram(self) -> None:
    self.product.ram = "16GB DDR4"

  def build_storage(self) -> None:
    self.product.storage = "512GB SSD"

  def build_gpu(self) -> None:
    self.product.gpu = "Integrated Graphics"


class BareboneComputerBuilder(ComputerBuilder):
  """Only picks a CPU and RAM; GPU and storage stay empty."""

  kind = "Barebone"

  def build_cpu(self) -> None:
    self.product.cpu = "Intel Core i3"

  def build_ram(self) -> None:
    self.product.ram = "8GB DDR4"


COMPUTER_DIRECTOR = Director(COMPUTER_STEPS)

# Register
register(GamingComputerBuilder)
register(OfficeComputerBuilder)
register(BareboneComputerBuilder)


__all__ = [
  "COMPUTER_STEPS",
  "COMPUTER_DIRECTOR",
  "Computer",
  "ComputerBuilder",
  "GamingComputerBuilder",
  "OfficeComputerBuilder",
  "BareboneComputerBuilder",
]
