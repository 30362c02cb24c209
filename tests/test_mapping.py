from dhakahome.domain.mapping import (
    APPROXIMATE_AREA_COORDS,
    DEFAULT_AMENITIES,
    coords_from_slice,
    extract_price,
    finalize_property,
    map_asset_to_property,
    parse_datetime,
    select_photo_urls,
)
from dhakahome.domain.types import Property


def test_map_full_asset(sample_asset):
    p = map_asset_to_property(sample_asset(), currency="BDT")

    assert p.id == "asset-1"
    assert p.title == "Lake View Flat"
    assert p.type == "Residential"
    assert p.listing_type == "Listed Rental"
    assert p.address == "Road 8/A, Dhanmondi, Dhaka"
    assert p.bedrooms == 3
    assert p.bathrooms == 2
    assert p.area == 1450
    assert p.parking == 1
    assert p.price == 55000
    assert p.currency == "BDT"
    assert p.badges == ["Residential", "Listed Rental", "Dhaka", "Dhanmondi", "Semi Furnished"]
    assert p.gallery == ["https://cdn.test/a.jpg", "https://cdn.test/b.jpg"]
    assert p.images == p.gallery
    assert p.has_images is True
    assert p.amenities == list(DEFAULT_AMENITIES)
    assert (p.latitude, p.longitude) == APPROXIMATE_AREA_COORDS["dhanmondi"]


def test_snake_and_camel_keys():
    raw = {
        "id": "a2",
        "name": "Shop",
        "details": {"listingTitle": "Corner Shop", "property_type": "commercial", "listing_type": "for_sale",
                    "sale_price": "4500000", "build_year": 2015, "listing_date": "2024-03-05T10:00:00Z",
                    "features": ["Lift", "", "Lift", "Generator"]},
        "location": {"lat": "23.7", "lng": "90.4", "raw": "Motijheel C/A"},
    }
    p = map_asset_to_property(raw)
    assert p.title == "Corner Shop"
    assert p.type == "Commercial"
    assert p.listing_type == "For Sale"
    assert p.price == 4500000
    assert p.build_year == 2015
    assert p.listing_year == 2024
    assert p.listing_date == "Mar 05, 2024"
    assert p.amenities == ["Lift", "Generator"]
    assert p.address == "Motijheel C/A"
    assert (p.latitude, p.longitude) == (23.7, 90.4)


def test_details_as_json_string():
    raw = {"ID": "a3", "Details": '{"bedrooms": 2, "rent_price": 18000}'}
    p = map_asset_to_property(raw)
    assert p.bedrooms == 2
    assert p.price == 18000


def test_empty_asset_still_gets_display_defaults():
    for raw in (None, {}):
        p = map_asset_to_property(raw)
        assert p.title == "Property"
        assert p.currency == "৳"
        assert p.amenities == list(DEFAULT_AMENITIES)

    assert map_asset_to_property({}, currency="BDT").currency == "BDT"


def test_missing_title_gets_default():
    assert map_asset_to_property({"ID": "x"}).title == "Property"


def test_coordinate_array_either_order():
    assert coords_from_slice([90.41, 23.79]) == (23.79, 90.41)
    assert coords_from_slice([23.79, 90.41]) == (23.79, 90.41)
    assert coords_from_slice(["23.79", "90.41"]) == (23.79, 90.41)
    assert coords_from_slice([1]) is None
    assert coords_from_slice(["x", 2]) is None


def test_location_coordinates_array():
    raw = {"ID": "c", "Location": {"coordinates": [90.39, 23.87]}}
    p = map_asset_to_property(raw)
    assert (p.latitude, p.longitude) == (23.87, 90.39)


def test_photo_selection_cover_first_and_skips_blank():
    photos = [
        {"FileURL": "one"},
        {},
        {"file_url": ""},
        "junk",
        {"fileUrl": "two", "is_cover": "true"},
        {"FileURL": "three", "IsCover": False},
    ]
    assert select_photo_urls(photos) == ["two", "one", "three"]


def test_price_precedence():
    assert extract_price({"pricing": {"monthly_rent": 0, "sale_price": 10}, "rent_price": 5}) == 10
    assert extract_price({"sale_price": 0, "rent_price": 700}) == 700
    assert extract_price({}) == 0


def test_parse_datetime_layouts():
    assert parse_datetime("2024-01-02").year == 2024
    assert parse_datetime("02 Jan 2024").month == 1
    assert parse_datetime("1700000000").year == 2023
    assert parse_datetime("yesterday") is None
    assert parse_datetime("") is None


def test_finalize_does_not_mutate_input():
    p = Property(id="m", images=["i.png"], badges=["For Sale", "Plot"], address="Uttara")
    out = finalize_property(p, currency="৳")

    assert out is not p
    assert p.gallery == []
    assert p.listing_type == ""
    assert out.gallery == ["i.png"]
    assert out.listing_type == "For Sale"
    assert out.type == "Plot"
    assert out.currency == "৳"
    assert (out.latitude, out.longitude) == APPROXIMATE_AREA_COORDS["uttara"]


def test_finalize_keeps_real_coordinates():
    p = Property(id="m", address="Gulshan", latitude=1.0, longitude=2.0)
    out = finalize_property(p)
    assert (out.latitude, out.longitude) == (1.0, 2.0)
