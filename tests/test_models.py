from __future__ import annotations

import pytest
from pydantic import ValidationError

from fakegps.models.coordinate import LatLong
from fakegps.models.store_path import CandidatePath


class TestLatLong:
    def test_is_frozen(self) -> None:
        lat_long = LatLong(latitude=1.0, longitude=2.0)
        with pytest.raises(ValidationError):
            lat_long.latitude = 3.0  # type: ignore[misc]

    def test_no_range_check(self) -> None:
        lat_long = LatLong(latitude=99.0, longitude=200.0)
        assert (lat_long.latitude, lat_long.longitude) == (99.0, 200.0)

    def test_str_is_lat_comma_lon(self) -> None:
        assert str(LatLong(latitude=51.5074, longitude=-0.1278)) == "51.5074,-0.1278"

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LatLong(latitude=1.0, longitude=2.0, altitude=3.0)  # type: ignore[call-arg]

    def test_json_dump(self) -> None:
        assert LatLong(latitude=1.5, longitude=-2.0).model_dump() == {"latitude": 1.5, "longitude": -2.0}


def test_candidate_path_display() -> None:
    path = CandidatePath(device_class="SENSOR", instance_id="0000", key=r"SYSTEM\X")
    assert path.display == r"HKLM\SYSTEM\X"
    assert str(path) == path.display
