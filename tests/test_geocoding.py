import json

import pytest

from mapsapi.geocoding import (
    GEOCODING_API,
    AddressComponent,
    AddressGeometry,
    AddressPlusCode,
    GeocodeAccuracy,
    GeocodingRequest,
    GeocodingResult,
    parse_geocoding_results,
)
from mapsapi.latlng import LatLng, LatLngBounds
from mapsapi.signer import encode_query

GOOGLE_HQ_RESPONSE = """{
    "results": [
        {
            "address_components": [
                {"long_name": "1600", "short_name": "1600", "types": ["street_number"]},
                {"long_name": "Amphitheatre Pkwy", "short_name": "Amphitheatre Pkwy", "types": ["route"]},
                {"long_name": "Mountain View", "short_name": "Mountain View", "types": ["locality", "political"]},
                {"long_name": "Santa Clara County", "short_name": "Santa Clara County",
                 "types": ["administrative_area_level_2", "political"]},
                {"long_name": "California", "short_name": "CA",
                 "types": ["administrative_area_level_1", "political"]},
                {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
                {"long_name": "94043", "short_name": "94043", "types": ["postal_code"]}
            ],
            "formatted_address": "1600 Amphitheatre Parkway, Mountain View, CA 94043, USA",
            "geometry": {
                "location": {"lat": 37.4224764, "lng": -122.0842499},
                "bounds": {
                    "northeast": {"lat": 37.4238253802915, "lng": -122.0829009197085},
                    "southwest": {"lat": 37.4211274197085, "lng": -122.0855988802915}
                },
                "location_type": "ROOFTOP",
                "viewport": {
                    "northeast": {"lat": 37.4238253802915, "lng": -122.0829009197085},
                    "southwest": {"lat": 37.4211274197085, "lng": -122.0855988802915}
                }
            },
            "partial_math": false,
            "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
            "types": ["street_address"]
        }
    ],
    "status": "OK"
}"""

REVERSE_RESPONSE = """{
    "results": [
        {
            "address_components": [
                {"long_name": "277", "short_name": "277", "types": ["street_number"]},
                {"long_name": "Bedford Avenue", "short_name": "Bedford Ave", "types": ["route"]},
                {"long_name": "Williamsburg", "short_name": "Williamsburg", "types": ["neighborhood", "political"]},
                {"long_name": "Brooklyn", "short_name": "Brooklyn", "types": ["sublocality", "political"]},
                {"long_name": "Kings", "short_name": "Kings", "types": ["administrative_area_level_2", "political"]},
                {"long_name": "New York", "short_name": "NY", "types": ["administrative_area_level_1", "political"]},
                {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
                {"long_name": "11211", "short_name": "11211", "types": ["postal_code"]}
            ],
            "formatted_address": "277 Bedford Avenue, Brooklyn, NY 11211, USA",
            "geometry": {
                "location": {"lat": 40.714232, "lng": -73.9612889},
                "bounds": {
                    "northeast": {"lat": 40.7155809802915, "lng": -73.9599399197085},
                    "southwest": {"lat": 40.7128830197085, "lng": -73.96263788029151}
                },
                "location_type": "ROOFTOP",
                "viewport": {
                    "northeast": {"lat": 40.7155809802915, "lng": -73.9599399197085},
                    "southwest": {"lat": 40.7128830197085, "lng": -73.96263788029151}
                }
            },
            "place_id": "ChIJd8BlQ2BZwokRAFUEcm_qrcA",
            "types": ["street_address"]
        }
    ],
    "status": "OK"
}"""

PLACE_ID_RESPONSE = """{
    "results": [
        {
            "address_components": [
                {"long_name": "1600", "short_name": "1600", "types": ["street_number"]},
                {"long_name": "Amphitheatre Pkwy", "short_name": "Amphitheatre Pkwy", "types": ["route"]},
                {"long_name": "Mountain View", "short_name": "Mountain View", "types": ["locality", "political"]},
                {"long_name": "Santa Clara County", "short_name": "Santa Clara County",
                 "types": ["administrative_area_level_2", "political"]},
                {"long_name": "California", "short_name": "CA",
                 "types": ["administrative_area_level_1", "political"]},
                {"long_name": "United States", "short_name": "US", "types": ["country", "political"]},
                {"long_name": "94043", "short_name": "94043", "types": ["postal_code"]}
            ],
            "formatted_address": "1600 Amphitheatre Parkway, Mountain View, CA 94043, USA",
            "geometry": {
                "location": {"lat": 37.4224764, "lng": -122.0842499},
                "location_type": "ROOFTOP",
                "viewport": {
                    "northeast": {"lat": 37.4238253802915, "lng": -122.0829009197085},
                    "southwest": {"lat": 37.4211274197085, "lng": -122.0855988802915}
                }
            },
            "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
            "types": ["street_address"]
        }
    ],
    "status": "OK"
}"""

HQ_COMPONENTS = [
    AddressComponent("1600", "1600", ["street_number"]),
    AddressComponent("Amphitheatre Pkwy", "Amphitheatre Pkwy", ["route"]),
    AddressComponent("Mountain View", "Mountain View", ["locality", "political"]),
    AddressComponent("Santa Clara County", "Santa Clara County", ["administrative_area_level_2", "political"]),
    AddressComponent("California", "CA", ["administrative_area_level_1", "political"]),
    AddressComponent("United States", "US", ["country", "political"]),
    AddressComponent("94043", "94043", ["postal_code"]),
]

HQ_BOX = LatLngBounds(
    northeast=LatLng(37.4238253802915, -122.0829009197085),
    southwest=LatLng(37.4211274197085, -122.0855988802915),
)


def _query(request):
    return encode_query({**request.params(), "key": ["placeholder"]})


def test_geocoding_google_hq():
    request = GeocodingRequest(address="1600 Amphitheatre Parkway, Mountain View, CA")
    request.validate_geocode()
    results = parse_geocoding_results(json.loads(GOOGLE_HQ_RESPONSE))
    assert len(results) == 1
    expected = GeocodingResult(
        address_components=HQ_COMPONENTS,
        formatted_address="1600 Amphitheatre Parkway, Mountain View, CA 94043, USA",
        geometry=AddressGeometry(
            location=LatLng(37.4224764, -122.0842499),
            location_type="ROOFTOP",
            bounds=HQ_BOX,
            viewport=HQ_BOX,
        ),
        types=["street_address"],
        place_id="ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
        partial_match=False,
    )
    assert results[0] == expected


def test_reverse_geocoding():
    request = GeocodingRequest(latlng=LatLng(40.714224, -73.961452))
    request.validate_reverse()
    results = parse_geocoding_results(json.loads(REVERSE_RESPONSE))
    assert len(results) == 1
    box = LatLngBounds(
        northeast=LatLng(40.7155809802915, -73.9599399197085),
        southwest=LatLng(40.7128830197085, -73.96263788029151),
    )
    expected = GeocodingResult(
        address_components=[
            AddressComponent("277", "277", ["street_number"]),
            AddressComponent("Bedford Avenue", "Bedford Ave", ["route"]),
            AddressComponent("Williamsburg", "Williamsburg", ["neighborhood", "political"]),
            AddressComponent("Brooklyn", "Brooklyn", ["sublocality", "political"]),
            AddressComponent("Kings", "Kings", ["administrative_area_level_2", "political"]),
            AddressComponent("New York", "NY", ["administrative_area_level_1", "political"]),
            AddressComponent("United States", "US", ["country", "political"]),
            AddressComponent("11211", "11211", ["postal_code"]),
        ],
        formatted_address="277 Bedford Avenue, Brooklyn, NY 11211, USA",
        geometry=AddressGeometry(
            location=LatLng(40.714232, -73.9612889),
            location_type="ROOFTOP",
            bounds=box,
            viewport=box,
        ),
        place_id="ChIJd8BlQ2BZwokRAFUEcm_qrcA",
        types=["street_address"],
    )
    assert results[0] == expected


def test_reverse_geocoding_place_id():
    request = GeocodingRequest(place_id="ChIJ2eUgeAK6j4ARbn5u_wAGqWA")
    request.validate_reverse()
    assert request.params() == {"place_id": ["ChIJ2eUgeAK6j4ARbn5u_wAGqWA"]}
    results = parse_geocoding_results(json.loads(PLACE_ID_RESPONSE))
    assert len(results) == 1
    expected = GeocodingResult(
        address_components=HQ_COMPONENTS,
        formatted_address="1600 Amphitheatre Parkway, Mountain View, CA 94043, USA",
        geometry=AddressGeometry(
            location=LatLng(37.4224764, -122.0842499),
            location_type="ROOFTOP",
            viewport=HQ_BOX,
        ),
        place_id="ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
        types=["street_address"],
    )
    assert results[0] == expected
    assert results[0].geometry.bounds == LatLngBounds()


def test_geocoding_empty_request():
    with pytest.raises(ValueError, match="all missing"):
        GeocodingRequest().validate_geocode()


def test_reverse_geocoding_empty_request():
    with pytest.raises(ValueError, match="both missing"):
        GeocodingRequest().validate_reverse()


def test_geocoding_failing_server():
    with pytest.raises(RuntimeError, match="ERROR"):
        parse_geocoding_results({"status": "ERROR"})


def test_geocoding_error_message_included():
    with pytest.raises(RuntimeError, match="request denied here"):
        parse_geocoding_results({"status": "REQUEST_DENIED", "error_message": "request denied here"})


def test_geocoding_request_url():
    request = GeocodingRequest(
        address="Santa Cruz",
        bounds=LatLngBounds(LatLng(34.172684, -118.604794), LatLng(34.236144, -118.500938)),
        region="es",
        result_type=["country"],
        location_type=[GeocodeAccuracy.APPROXIMATE],
        components={"country": "ES"},
        language="es",
    )
    assert _query(request) == (
        "address=Santa+Cruz&bounds=34.236144%2C-118.500938%7C34.172684%2C-118.604794"
        "&components=country%3AES&key=placeholder&language=es&location_type=APPROXIMATE"
        "&region=es&result_type=country"
    )


def test_custom_pass_through_geocoding_url():
    request = GeocodingRequest(
        address="1600 Amphitheatre Parkway, Mountain View, CA",
        custom={"new_forward_geocoder": ["true"]},
    )
    assert _query(request) == (
        "address=1600+Amphitheatre+Parkway%2C+Mountain+View%2C+CA&key=placeholder"
        "&new_forward_geocoder=true"
    )


def test_custom_is_overridden_by_fields():
    request = GeocodingRequest(address="Sydney", custom={"address": ["Melbourne"]})
    assert request.params()["address"] == ["Sydney"]


def test_multiple_location_types_and_latlng():
    request = GeocodingRequest(
        latlng=LatLng(40.714224, -73.961452),
        location_type=[GeocodeAccuracy.ROOFTOP, GeocodeAccuracy.RANGE_INTERPOLATED],
        result_type=["street_address", "route"],
    )
    params = request.params()
    assert params["latlng"] == ["40.714224,-73.961452"]
    assert params["location_type"] == ["ROOFTOP|RANGE_INTERPOLATED"]
    assert params["result_type"] == ["street_address|route"]


def test_geocoding_zero_results():
    assert parse_geocoding_results({"results": [], "status": "ZERO_RESULTS"}) == []


def test_plus_code_parsed():
    result = GeocodingResult.from_dict(
        {"plus_code": {"global_code": "849VCWC8+R9", "compound_code": "CWC8+R9, Mountain View"},
         "partial_match": True}
    )
    assert result.plus_code == AddressPlusCode("849VCWC8+R9", "CWC8+R9, Mountain View")
    assert result.partial_match is True


def test_api_endpoint():
    assert GEOCODING_API.url() == "https://maps.googleapis.com/maps/api/geocode/json"