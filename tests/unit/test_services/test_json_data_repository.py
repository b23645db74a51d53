"""
Unit tests for JsonDataRepository.

Uses real temporary files rather than mocking file access.
"""

import json
import pytest
from unittest.mock import patch

from subway_router.core.interfaces.i_data_repository import NetworkDataError
from subway_router.core.models import Position
from subway_router.core.services.json_data_repository import JsonDataRepository


class TestLoading:
    """Test reading subway data documents."""

    def test_load_network_from_configured_file(self, subway_data_file):
        repository = JsonDataRepository(subway_data_file)

        network = repository.load_network()

        assert network.station_ids == ["A", "B", "C"]
        assert network.get_station("B").position == Position(3.0, 4.0, 0.0)
        assert [line.name for line in network.lines] == ["L1", "L2"]
        assert repository.last_loaded is not None

    def test_load_network_is_cached(self, subway_data_file):
        repository = JsonDataRepository(subway_data_file)

        first = repository.load_network()
        subway_data_file.write_text("not json", encoding="utf-8")

        assert repository.load_network() is first

    def test_refresh_data_rereads_file(self, subway_data_file, sample_subway_data):
        repository = JsonDataRepository(subway_data_file)
        repository.load_network()

        sample_subway_data["stations"].append(
            {"id": "D", "name": "Delta", "position": {"x": 9, "y": 9, "z": 9}}
        )
        subway_data_file.write_text(json.dumps(sample_subway_data), encoding="utf-8")

        assert repository.refresh_data() is True
        assert repository.load_network().has_station("D")

    def test_default_file_is_bundled_data(self):
        repository = JsonDataRepository()

        network = repository.load_network()

        assert repository.data_file.name == "subway-data.json"
        assert network.station_count > 0
        assert network.line_count > 0

    def test_missing_bundled_data_is_reported_on_load(self):
        with patch(
            "subway_router.utils.data_path_resolver.get_default_data_file",
            side_effect=FileNotFoundError("Could not find data directory"),
        ):
            repository = JsonDataRepository()

        assert repository.data_file is None
        with pytest.raises(NetworkDataError, match="Could not find data directory"):
            repository.load_network()

    def test_interface_helpers(self, subway_data_file):
        repository = JsonDataRepository(subway_data_file)

        assert [s.id for s in repository.load_stations()] == ["A", "B", "C"]
        assert [l.id for l in repository.load_lines()] == ["l1", "l2"]
        assert repository.get_station_by_id("C").name == "Charlie"
        assert repository.get_station_by_id("Z") is None


class TestValidation:
    """Test shape validation and error reporting."""

    def setup_method(self):
        self.repository = JsonDataRepository()

    def test_missing_file(self, tmp_path):
        with pytest.raises(NetworkDataError, match="Failed to load subway data"):
            self.repository.load_network_from_file(tmp_path / "missing.json")

    def test_invalid_json(self):
        with pytest.raises(NetworkDataError, match="Invalid JSON"):
            self.repository.load_network_from_text("{not json")

    def test_non_object_document(self):
        with pytest.raises(NetworkDataError, match="Invalid subway data format"):
            self.repository.load_network_from_text("[1, 2, 3]")

    @pytest.mark.parametrize("missing", ["stations", "lines"])
    def test_missing_collection(self, sample_subway_data, missing):
        del sample_subway_data[missing]

        with pytest.raises(NetworkDataError, match="Invalid subway data format"):
            self.repository.parse_network(sample_subway_data)

    @pytest.mark.parametrize("empty", ["stations", "lines"])
    def test_empty_collection(self, sample_subway_data, empty):
        sample_subway_data[empty] = []

        with pytest.raises(NetworkDataError):
            self.repository.parse_network(sample_subway_data)

    def test_station_without_position(self, sample_subway_data):
        del sample_subway_data["stations"][0]["position"]

        with pytest.raises(NetworkDataError):
            self.repository.parse_network(sample_subway_data)

    def test_non_numeric_coordinate(self, sample_subway_data):
        sample_subway_data["stations"][0]["position"]["x"] = "east"

        with pytest.raises(NetworkDataError):
            self.repository.parse_network(sample_subway_data)

    def test_error_chains_cause(self):
        with pytest.raises(NetworkDataError) as excinfo:
            self.repository.load_network_from_text("{")

        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    def test_lines_may_reference_unknown_stations(self, sample_subway_data):
        sample_subway_data["lines"].append({"id": "ghost", "name": "Ghost", "stations": ["A", "NOWHERE"]})

        network = self.repository.parse_network(sample_subway_data)

        assert network.get_line("ghost").stations == ["A", "NOWHERE"]

    def test_short_lines_are_accepted(self, sample_subway_data):
        sample_subway_data["lines"].append({"id": "stub", "name": "Stub", "color": "#000", "stations": ["A"]})

        network = self.repository.parse_network(sample_subway_data)

        assert network.get_line("stub").station_count == 1

    def test_color_defaults_to_empty(self, sample_subway_data):
        del sample_subway_data["lines"][0]["color"]

        network = self.repository.parse_network(sample_subway_data)

        assert network.get_line("l1").color == ""

    def test_file_that_is_not_utf8(self, tmp_path):
        bad_file = tmp_path / "latin1.json"
        bad_file.write_bytes(b'{"stations": [\xff\xfe]}')

        with pytest.raises(NetworkDataError, match="Failed to load subway data") as excinfo:
            self.repository.load_network_from_file(bad_file)

        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    @pytest.mark.parametrize("blank_id", [" ", "\t\n"])
    def test_blank_station_id(self, sample_subway_data, blank_id):
        sample_subway_data["stations"][0]["id"] = blank_id

        with pytest.raises(NetworkDataError, match="Invalid subway data format"):
            self.repository.parse_network(sample_subway_data)

    def test_model_rejection_is_wrapped(self, sample_subway_data):
        with patch(
            "subway_router.core.services.json_data_repository.SubwayNetwork",
            side_effect=ValueError("Station id cannot be empty"),
        ):
            with pytest.raises(NetworkDataError, match="Station id cannot be empty") as excinfo:
                self.repository.parse_network(sample_subway_data)

        assert isinstance(excinfo.value.__cause__, ValueError)
