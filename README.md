# mapsapi

Building blocks for talking to mapping web services. It has request
dataclasses that turn themselves into query parameters and parsers that turn
JSON responses into dataclasses. It also has a few geographic and signing
utilities.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `mapsapi.latlng` | `LatLng`, `LatLngBounds`, `parse_latlng`, `parse_latlng_list` |
| `mapsapi.polyline` | `Polyline`, `decode_polyline`, `encode` for the encoded polyline format |
| `mapsapi.signer` | `generate_signature`, `encode_query`, `sign_url` (URL-safe base64 HMAC-SHA1) |
| `mapsapi.timetypes` | `DateTime`, `Duration`, `Location`, `format_duration` |
| `mapsapi.metrics` | `Reporter`, `RequestMetric`, `NoOpReporter`, `StatsReporter` |
| `mapsapi.api` | `ApiConfig`: host, path and accepted credentials of an endpoint |
| `mapsapi.geocoding` | `GeocodingRequest`, `GeocodingResult`, `GeocodeAccuracy`, `parse_geocoding_results` |
| `mapsapi.geolocation` | `GeolocationRequest`, `CellTower`, `WiFiAccessPoint`, `RadioType`, `GeolocationError`, `parse_geolocation_response` |
| `mapsapi.roads` | `SnapToRoadRequest`, `NearestRoadsRequest`, `SpeedLimitsRequest` and their responses |
| `mapsapi.autocomplete` | `QueryAutocompleteRequest`, `PlaceAutocompleteRequest`, `AutocompleteResponse`, `new_session_token` |
| `mapsapi.places_search` | `NearbySearchRequest`, `TextSearchRequest`, `PlacesSearchResponse` |
| `mapsapi.place_details` | `PlaceDetailsRequest`, `PlaceDetailsResult`, `parse_place_details_response` |
| `mapsapi.find_place` | `FindPlaceFromTextRequest`, `FindPlaceFromTextResponse`, `PlacePhotoRequest`, `PlacePhotoResponse` |

Each module that describes an endpoint also defines its `ApiConfig` constant,
for example `GEOCODING_API` or `SNAP_TO_ROADS_API`. The `url()` method of an
`ApiConfig` returns the host and path joined together.

## Examples

Coordinates and polylines:

```python
from mapsapi.latlng import LatLng, parse_latlng
from mapsapi.polyline import decode_polyline, encode

point = parse_latlng("12.34,56.78")
point.almost_equal(LatLng(12.34, 56.78), 0.0001)   # True
str(point)                                          # "12.34,56.78"

path = decode_polyline("ynkrFq|zfE?sCnBpA")
encode(path)                                        # "ynkrFq|zfE?sCnBpA"
```

Building a geocoding query:

```python
from mapsapi.geocoding import GeocodingRequest
from mapsapi.signer import encode_query

request = GeocodingRequest(address="Santa Cruz", region="es", language="es")
request.validate_geocode()          # raises ValueError when there is nothing to look up
encode_query(request.params())      # "address=Santa+Cruz&language=es&region=es"
```

`encode_query` sorts parameters by key. It keeps repeated values in their
given order.

Signing a request with a shared secret:

```python
from mapsapi.signer import sign_url

query = sign_url("/maps/api/geocode/json", b"secret", {"address": ["Sydney"]})
# "address=Sydney&signature=..."
```

Parsing responses:

```python
from mapsapi.geocoding import parse_geocoding_results
from mapsapi.geolocation import parse_geolocation_response

parse_geocoding_results({"results": [], "status": "ZERO_RESULTS"})   # []
parse_geolocation_response({"location": {"lat": 39.7, "lng": -104.9}, "accuracy": 4.7})
```

A geolocation request serialises to the compact JSON body the service takes:

```python
from mapsapi.geolocation import GeolocationRequest, RadioType

GeolocationRequest(radio_type=RadioType.GSM, consider_ip=True).to_json()
# '{"radioType":"gsm","considerIp":true}'
```

Time values:

```python
from datetime import timedelta
from mapsapi.timetypes import Duration

Duration.from_timedelta(timedelta(seconds=133))   # Duration(value=133, text="2m13s")
```

Metrics:

```python
from mapsapi.metrics import COUNT_VIEW, StatsReporter

reporter = StatsReporter()
metric = reporter.new_request("Geocode")
metric.end_request(None, 200, "")
reporter.retrieve_data(COUNT_VIEW)   # one row with count 1
```

`StatsReporter` keeps request counts and latency distributions in memory. It
groups them by request name, error text, HTTP status code and metro area.

## Errors

- Every `validate` method raises `ValueError` when a request lacks the fields
  that the service requires.
- The geocoding, places search, place details and find-place parsers raise
  `RuntimeError` for any status other than `OK` or `ZERO_RESULTS`.
- `parse_geolocation_response` raises `GeolocationError` when the response
  carries an error object.
- `PlacePhotoResponse.from_http` raises `RuntimeError` on HTTP 403.
- `PlacePhotoResponse.image()` decodes the data with Pillow. It accepts only
  `image/jpeg` and raises `ValueError` for any other content type.

## What this package does not do

It has no HTTP client and sends no requests. You build the query parameters or
the JSON body, send them with the HTTP library of your choice, and pass the
decoded JSON back to the parsers. API keys, client IDs, rate limiting and
retries are up to the caller. The package has no command-line program.