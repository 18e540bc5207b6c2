import json

import pytest

from mapsapi.latlng import LatLng
from mapsapi.roads import (
    NearestRoadsRequest,
    NearestRoadsResponse,
    SnappedPoint,
    SnapToRoadRequest,
    SnapToRoadResponse,
    SpeedLimit,
    SpeedLimitsRequest,
    SpeedLimitsResponse,
    SpeedLimitUnit,
)
from mapsapi.signer import encode_query

SNAPPED_RESPONSE = """{
  "snappedPoints": [
    {"location": {"latitude": -35.2784167, "longitude": 149.1294692},
     "originalIndex": 0, "placeId": "ChIJoR7CemhNFmsRQB9QbW7qABM"},
    {"location": {"latitude": -35.280321693840129, "longitude": 149.12908274880189},
     "originalIndex": 1, "placeId": "ChIJiy6YT2hNFmsRkHZAbW7qABM"},
    {"location": {"latitude": -35.2803415, "longitude": 149.1290788},
     "placeId": "ChIJiy6YT2hNFmsRkHZAbW7qABM"},
    {"location": {"latitude": -35.280451499999991, "longitude": 149.1290784},
     "placeId": "ChIJI2FUTGhNFmsRcHpAbW7qABM"},
    {"location": {"latitude": -35.280734599999995, "longitude": 149.1291517},
     "placeId": "ChIJW9R7smlNFmsRMH1AbW7qABM"},
    {"location": {"latitude": -35.280960897210818, "longitude": 149.1293250692261},
     "originalIndex": 2, "placeId": "ChIJW9R7smlNFmsRMH1AbW7qABM"},
    {"location": {"latitude": -35.284728724835304, "longitude": 149.12835061713685},
     "originalIndex": 7, "placeId": "ChIJW5JAZmpNFmsRegG0-Jc80sM"}
  ]
}"""

EXPECTED_POINTS = [
    SnappedPoint(LatLng(-35.2784167, 149.1294692), 0, "ChIJoR7CemhNFmsRQB9QbW7qABM"),
    SnappedPoint(LatLng(-35.28032169384013, 149.1290827488019), 1, "ChIJiy6YT2hNFmsRkHZAbW7qABM"),
    SnappedPoint(LatLng(-35.2803415, 149.1290788), None, "ChIJiy6YT2hNFmsRkHZAbW7qABM"),
    SnappedPoint(LatLng(-35.28045149999999, 149.1290784), None, "ChIJI2FUTGhNFmsRcHpAbW7qABM"),
    SnappedPoint(LatLng(-35.280734599999995, 149.1291517), None, "ChIJW9R7smlNFmsRMH1AbW7qABM"),
    SnappedPoint(LatLng(-35.28096089721082, 149.1293250692261), 2, "ChIJW9R7smlNFmsRMH1AbW7qABM"),
    SnappedPoint(LatLng(-35.284728724835304, 149.12835061713685), 7, "ChIJW5JAZmpNFmsRegG0-Jc80sM"),
]

PATH = [
    LatLng(-35.27801, 149.12958),
    LatLng(-35.28032, 149.12907),
    LatLng(-35.28099, 149.12929),
    LatLng(-35.28144, 149.12984),
]

SPEED_PLACE_IDS = [
    "ChIJ1Wi6I2pNFmsRQL9GbW7qABM",
    "ChIJ58xCoGlNFmsRUEZUbW7qABM",
    "ChIJ9RhaiGlNFmsR0IxAbW7qABM",
    "ChIJabjuhGlNFmsREIxAbW7qABM",
]


def test_snap_to_road_response():
    response = SnapToRoadResponse.from_dict(json.loads(SNAPPED_RESPONSE))
    assert response == SnapToRoadResponse(snapped_points=EXPECTED_POINTS)


def test_nearest_roads_response():
    response = NearestRoadsResponse.from_dict(json.loads(SNAPPED_RESPONSE))
    assert response.snapped_points == EXPECTED_POINTS


def test_snap_to_road_no_path():
    with pytest.raises(ValueError, match="Path empty"):
        SnapToRoadRequest().validate()


def test_nearest_roads_no_points():
    with pytest.raises(ValueError, match="Points empty"):
        NearestRoadsRequest().validate()


def test_speed_limits_no_place_ids():
    with pytest.raises(ValueError, match="Path and PlaceID both empty"):
        SpeedLimitsRequest().validate()


def test_nearest_roads_params():
    request = NearestRoadsRequest(points=PATH[:2])
    request.validate()
    assert request.params() == {"points": ["-35.27801,149.12958|-35.28032,149.12907"]}


def test_speed_limit_response():
    data = {
        "speedLimits": [
            {"placeId": place_id, "speedLimit": 60, "units": "KPH"}
            for place_id in SPEED_PLACE_IDS
        ]
    }
    request = SpeedLimitsRequest(place_id=SPEED_PLACE_IDS)
    request.validate()
    response = SpeedLimitsResponse.from_dict(data)
    assert response == SpeedLimitsResponse(
        speed_limits=[SpeedLimit(place_id, 60, "KPH") for place_id in SPEED_PLACE_IDS],
        snapped_points=[],
    )
    assert response.speed_limits[0].units == SpeedLimitUnit.KPH


def test_snap_to_road_request_query():
    request = SnapToRoadRequest(path=[LatLng(1, 2), LatLng(3, 4)], interpolate=True)
    query = dict(request.params(), key="placeholder")
    assert encode_query(query) == "interpolate=true&key=placeholder&path=1%2C2%7C3%2C4"


def test_speed_limits_request_query():
    request = SpeedLimitsRequest(
        path=[LatLng(-35.27801, 149.12958), LatLng(-35.28032, 149.12907)],
        place_id=["ChIJ1Wi6I2pNFmsRQL9GbW7qABM", "ChIJ58xCoGlNFmsRUEZUbW7qABM"],
        units=SpeedLimitUnit.MPH,
    )
    query = dict(request.params(), key="placeholder")
    assert encode_query(query) == (
        "key=placeholder&path=-35.27801%2C149.12958%7C-35.28032%2C149.12907"
        "&placeId=ChIJ1Wi6I2pNFmsRQL9GbW7qABM&placeId=ChIJ58xCoGlNFmsRUEZUbW7qABM&units=MPH"
    )


def test_snap_to_road_without_interpolate():
    params = SnapToRoadRequest(path=PATH[:1]).params()
    assert "interpolate" not in params
    assert params["path"] == [str(PATH[0])]