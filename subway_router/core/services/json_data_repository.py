"""
JSON Data Repository Implementation

Repository implementation for loading subway data from JSON documents.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union
from pathlib import Path
from datetime import datetime

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..interfaces.i_data_repository import IDataRepository, NetworkDataError
from ..models.station import Station, Position
from ..models.subway_line import SubwayLine
from ..models.subway_network import SubwayNetwork


class PositionSchema(BaseModel):
    """Shape of a station position in the JSON document."""

    x: float
    y: float
    z: float


class StationSchema(BaseModel):
    """Shape of a station entry in the JSON document."""

    id: str = Field(..., min_length=1, description="Unique station id")
    name: str = Field(..., description="Station display name")
    position: PositionSchema

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        """Reject ids made only of whitespace."""
        if not v.strip():
            raise ValueError('Station id cannot be blank')
        return v

    def to_station(self) -> Station:
        return Station(
            id=self.id,
            name=self.name,
            position=Position(x=self.position.x, y=self.position.y, z=self.position.z),
        )


class LineSchema(BaseModel):
    """Shape of a line entry in the JSON document."""

    id: str = Field(..., min_length=1, description="Line id")
    name: str = Field(..., description="Line display name")
    color: str = Field(default="", description="Display color, unused by routing")
    stations: List[str] = Field(default_factory=list, description="Station ids in track order")

    def to_line(self) -> SubwayLine:
        return SubwayLine(id=self.id, name=self.name, color=self.color, stations=list(self.stations))


class SubwayDataSchema(BaseModel):
    """Top-level shape of a subway data document."""

    stations: List[StationSchema] = Field(..., min_length=1)
    lines: List[LineSchema] = Field(..., min_length=1)

    def to_network(self) -> SubwayNetwork:
        return SubwayNetwork(
            stations=[station.to_station() for station in self.stations],
            lines=[line.to_line() for line in self.lines],
        )


class JsonDataRepository(IDataRepository):
    """Repository implementation for JSON-based subway data."""

    def __init__(self, data_file: Optional[Union[str, Path]] = None):
        """
        Initialize the JSON data repository.

        Args:
            data_file: Path to the subway data document, defaults to the bundled file
        """
        self.logger = logging.getLogger(__name__)
        self._data_file_error: Optional[str] = None

        if data_file is None:
            try:
                from ...utils.data_path_resolver import get_default_data_file
                self.data_file: Optional[Path] = get_default_data_file()
            except FileNotFoundError as e:
                self.logger.warning(f"No bundled subway data available: {e}")
                self.data_file = None
                self._data_file_error = str(e)
        else:
            self.data_file = Path(data_file)

        self._network_cache: Optional[SubwayNetwork] = None
        self._last_loaded: Optional[datetime] = None

        self.logger.info(f"Initialized JsonDataRepository with data file: {self.data_file}")

    @property
    def last_loaded(self) -> Optional[datetime]:
        return self._last_loaded

    def load_network(self) -> SubwayNetwork:
        """Load the network from the configured file, cached after the first read."""
        if self._network_cache is None:
            if self.data_file is None:
                raise NetworkDataError(f"Failed to load subway data: {self._data_file_error}")
            self._network_cache = self.load_network_from_file(self.data_file)
            self._last_loaded = datetime.now()
        return self._network_cache

    def load_network_from_file(self, path: Union[str, Path]) -> SubwayNetwork:
        """Load and validate a subway network from a JSON file."""
        path = Path(path)
        self.logger.info(f"Loading subway data from {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Failed to read subway data file {path}: {e}")
            raise NetworkDataError(f"Failed to load subway data: {e}") from e

        return self.load_network_from_text(text)

    def load_network_from_text(self, text: str) -> SubwayNetwork:
        """Decode a JSON document and build a network from it."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            self.logger.error(f"JSON parsing failed at line {e.lineno}, column {e.colno}: {e}")
            raise NetworkDataError(f"Invalid JSON in subway data: {e}") from e

        return self.parse_network(data)

    def parse_network(self, data: Dict[str, Any]) -> SubwayNetwork:
        """Validate decoded subway data and build a network from it."""
        if not isinstance(data, dict):
            raise NetworkDataError("Invalid subway data format: expected an object with stations and lines")

        try:
            schema = SubwayDataSchema.model_validate(data)
        except ValidationError as e:
            self.logger.error(f"Subway data failed validation with {e.error_count()} errors")
            raise NetworkDataError(f"Invalid subway data format: {e}") from e

        try:
            network = schema.to_network()
        except ValueError as e:
            self.logger.error(f"Subway data rejected: {e}")
            raise NetworkDataError(f"Invalid subway data format: {e}") from e

        self.logger.info(f"Loaded {network.station_count} stations and {network.line_count} lines")
        return network

    def refresh_data(self) -> bool:
        """Clear the cached network so the next load re-reads the file."""
        self._network_cache = None
        self._last_loaded = None
        self.logger.info("Subway data cache cleared")
        return True
