"""
Calculator registry: maps calculator kinds to calculator classes.

Kinds are the catalogue ids the site publishes (kebab-case).
"""

from .area import (
    CircularRoomCalculator,
    LShapedRoomCalculator,
    MultiRoomCalculator,
    RectangularRoomCalculator,
    RoomAreaCalculator,
    RoomShapeCalculator,
    SquareFootageCalculator,
)
from .base import BaseCalculator
from .coatings import ConcreteCalculator, EpoxyCalculator, GarageFloorCalculator
from .cost import (
    FloorRepairCalculator,
    FlooringCostCalculator,
    InstallationCostCalculator,
    LaborCostCalculator,
    MaterialQuantityCalculator,
)
from .resilient import (
    CarpetCalculator,
    CorkCalculator,
    LinoleumCalculator,
    RubberCalculator,
    SheetVinylCalculator,
    VinylCalculator,
)
from .rugs import AreaRugCalculator
from .structure import (
    AcousticUnderlaymentCalculator,
    FloatingFloorGapCalculator,
    FloorJoistCalculator,
    FloorLoadCalculator,
    HvacRegisterCalculator,
    MoistureBarrierCalculator,
    RadiantHeatingCalculator,
    SubfloorCalculator,
    UnlevelFloorCalculator,
)
from .tile import (
    StoneCalculator,
    TileAdhesiveCalculator,
    TileCalculator,
    TileGroutCalculator,
    TilePatternCalculator,
)
from .trim import (
    BaseboardCalculator,
    MoldingCalculator,
    StairCalculator,
    TransitionStripCalculator,
)
from .waste import WastePercentageCalculator
from .wood import (
    BambooCalculator,
    EngineeredWoodCalculator,
    FloorFinishingCalculator,
    HardwoodCalculator,
    LaminateCalculator,
    ParquetCalculator,
)


class UnknownCalculatorError(ValueError):
    """No calculator is registered under the requested kind."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(
            f"No calculator registered for kind: {kind}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )


_CALCULATORS = (
    # Basic
    FlooringCostCalculator,
    SquareFootageCalculator,
    WastePercentageCalculator,
    RoomAreaCalculator,
    RoomShapeCalculator,
    RectangularRoomCalculator,
    CircularRoomCalculator,
    LShapedRoomCalculator,
    MultiRoomCalculator,
    AreaRugCalculator,
    InstallationCostCalculator,
    LaborCostCalculator,
    MaterialQuantityCalculator,
    FloorRepairCalculator,
    # Materials
    TileCalculator,
    TileAdhesiveCalculator,
    TileGroutCalculator,
    TilePatternCalculator,
    StoneCalculator,
    HardwoodCalculator,
    EngineeredWoodCalculator,
    BambooCalculator,
    LaminateCalculator,
    ParquetCalculator,
    VinylCalculator,
    SheetVinylCalculator,
    LinoleumCalculator,
    CorkCalculator,
    RubberCalculator,
    CarpetCalculator,
    EpoxyCalculator,
    GarageFloorCalculator,
    ConcreteCalculator,
    BaseboardCalculator,
    MoldingCalculator,
    TransitionStripCalculator,
    StairCalculator,
    # Advanced
    SubfloorCalculator,
    FloorJoistCalculator,
    FloorLoadCalculator,
    UnlevelFloorCalculator,
    MoistureBarrierCalculator,
    AcousticUnderlaymentCalculator,
    FloatingFloorGapCalculator,
    RadiantHeatingCalculator,
    HvacRegisterCalculator,
    FloorFinishingCalculator,
)

CALCULATOR_REGISTRY: dict[str, type] = {calc.kind: calc for calc in _CALCULATORS}


def get_calculator(kind: str) -> BaseCalculator:
    """Returns an instance of the calculator for a kind, or raises UnknownCalculatorError."""
    if kind not in CALCULATOR_REGISTRY:
        raise UnknownCalculatorError(kind)
    return CALCULATOR_REGISTRY[kind]()


def has_calculator(kind: str) -> bool:
    """Check if a calculator exists for a kind."""
    return kind in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered calculator kinds."""
    return list(CALCULATOR_REGISTRY.keys())
