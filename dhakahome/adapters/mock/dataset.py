# dhakahome/adapters/mock/dataset.py
from __future__ import annotations

from ...domain.types import Property

_IMG = "/assets/images/mock-properties/{}.png"
IMG_A = _IMG.format("db6726f48a0bae50917980327e8ff5eb40ae871e")
IMG_B = _IMG.format("8abeccd3fd2f4096a7b4a66a184c5ae36074637a")
IMG_C = _IMG.format("1f002be890c252fab41bc52a14801210d4fa2535")
IMG_D = _IMG.format("2f8fe8dfbde9fb83f633da9c0e8bdff775034700")
IMG_E = _IMG.format("d466fbc3c6a3829176f4bf45c88ed96204288a39")


def _p(**kw) -> Property:
    kw.setdefault("currency", "৳")
    return Property(**kw)


MOCK_PROPERTIES: tuple[Property, ...] = (
    # Uttara
    _p(
        id="mock-res-uttara-01",
        title="Luxury Apartment in Uttara Sec 7",
        address="House 12, Road 7, Sector 7, Uttara, Dhaka",
        price=45000,
        images=[IMG_A],
        badges=["To-let", "Verified", "Residential", "Fully Furnished"],
        build_year=2020,
        listing_date="2024-09-18",
        description="Spacious luxury apartment with modern finishes, abundant natural light, and easy access to Uttara's prime conveniences.",
        bedrooms=3,
        bathrooms=3,
        area=1800,
        parking=2,
    ),
    _p(
        id="mock-res-uttara-02",
        title="Modern Family Home Uttara Sec 10",
        address="Plot 25, Uttara Sec 10, Dhaka",
        price=8500000,
        images=[IMG_B],
        badges=["For Sale", "Verified", "Residential"],
        build_year=2018,
        listing_date="2024-10-05",
        description="Thoughtfully planned family home with generously sized bedrooms and attached baths.",
        bedrooms=4,
        bathrooms=4,
        area=2200,
        parking=2,
    ),
    _p(
        id="mock-res-uttara-03",
        title="Cozy Studio Apartment Uttara South",
        address="Uttara South, Sector 3, Dhaka",
        price=18000,
        images=[IMG_C],
        badges=["To-let", "Verified", "Residential", "Semi-Furnished"],
        build_year=2016,
        listing_date="2024-08-12",
        description="Efficient studio with smart layout, ideal for single living close to transport and retail.",
        bedrooms=1,
        bathrooms=1,
        area=650,
        parking=1,
    ),
    _p(
        id="mock-res-uttara-04",
        title="Spacious 4BR Apartment Uttara Sec 12",
        address="Road 15, Sector 12, Uttara, Dhaka",
        price=55000,
        images=[IMG_D],
        badges=["To-let", "Verified", "Residential", "Fully Furnished"],
        build_year=2019,
        listing_date="2024-09-01",
        description="Large four-bedroom with attached baths, ready-to-move furnishings, and cross-ventilation.",
        bedrooms=4,
        bathrooms=3,
        area=2000,
        parking=2,
    ),
    _p(
        id="mock-com-uttara-01",
        title="Premium Office Space Uttara Sec 11",
        address="Building: Crystal Tower, Sector 11, Uttara, Dhaka",
        price=120000,
        images=[IMG_E],
        badges=["To-let", "Verified", "Commercial", "Office Space"],
        build_year=2015,
        listing_date="2024-07-20",
        description="Grade-A office floor with open layout, ample light, and parking allocation.",
        bedrooms=0,
        bathrooms=2,
        area=2500,
        parking=3,
    ),
    _p(
        id="mock-com-uttara-02",
        title="Retail Shop Space Uttara Sec 4",
        address="Shop 5, Ground Floor, Uttara Sec 4, Dhaka",
        price=3500000,
        images=[IMG_B],
        badges=["For Sale", "Verified", "Commercial", "Retail"],
        build_year=2014,
        listing_date="2024-06-15",
        description="Street-facing retail bay with steady footfall and clear frontage.",
        bedrooms=0,
        bathrooms=1,
        area=800,
        parking=0,
    ),
    # Gulshan
    _p(
        id="mock-res-gulshan-01",
        title="Elegant Penthouse in Gulshan 2",
        address="Road 78, Gulshan 2, Dhaka",
        price=95000,
        images=[IMG_A],
        badges=["To-let", "Verified", "Residential", "Fully Furnished", "Luxury"],
        bedrooms=5,
        bathrooms=5,
        area=3500,
        parking=3,
    ),
    _p(
        id="mock-res-gulshan-02",
        title="Modern 3BR Flat Gulshan 1",
        address="House 45, Road 12, Gulshan 1, Dhaka",
        price=65000,
        images=[IMG_D],
        badges=["To-let", "Verified", "Residential", "Semi-Furnished"],
        bedrooms=3,
        bathrooms=2,
        area=1600,
        parking=2,
    ),
    _p(
        id="mock-com-gulshan-01",
        title="Corporate Office Gulshan Avenue",
        address="Gulshan Avenue, Gulshan 1, Dhaka",
        price=250000,
        images=[IMG_E],
        badges=["To-let", "Verified", "Commercial", "Office Space", "Premium"],
        bedrooms=0,
        bathrooms=4,
        area=4000,
        parking=5,
    ),
    # Banani
    _p(
        id="mock-res-banani-01",
        title="Luxurious Apartment Banani DOHS",
        address="Block C, Road 5, Banani DOHS, Dhaka",
        price=75000,
        images=[IMG_C],
        badges=["To-let", "Verified", "Residential", "Fully Furnished"],
        bedrooms=4,
        bathrooms=4,
        area=2400,
        parking=2,
    ),
    _p(
        id="mock-res-banani-02",
        title="2 Bedroom Apartment in Banani",
        address="Road 11, Banani, Dhaka",
        price=35000,
        images=[IMG_B],
        badges=["To-let", "Verified", "Residential"],
        bedrooms=2,
        bathrooms=2,
        area=1100,
        parking=1,
    ),
    # Dhanmondi
    _p(
        id="mock-res-dhanmondi-01",
        title="Beautiful Lake View Flat Dhanmondi",
        address="Road 8/A, Dhanmondi, Dhaka",
        price=55000,
        images=[IMG_A],
        badges=["To-let", "Verified", "Residential", "Lake View"],
        bedrooms=3,
        bathrooms=3,
        area=1900,
        parking=2,
    ),
    _p(
        id="mock-res-dhanmondi-02",
        title="Spacious Family Apartment Dhanmondi 15",
        address="Road 15, Dhanmondi, Dhaka",
        price=12000000,
        images=[IMG_D],
        badges=["For Sale", "Verified", "Residential"],
        bedrooms=4,
        bathrooms=3,
        area=2100,
        parking=2,
    ),
    _p(
        id="mock-com-dhanmondi-01",
        title="Commercial Space Satmasjid Road",
        address="Satmasjid Road, Dhanmondi, Dhaka",
        price=85000,
        images=[IMG_E],
        badges=["To-let", "Verified", "Commercial", "Retail"],
        bedrooms=0,
        bathrooms=2,
        area=1500,
        parking=1,
    ),
    # Mirpur
    _p(
        id="mock-res-mirpur-01",
        title="Affordable Family Flat Mirpur 10",
        address="Road 12, Mirpur 10, Dhaka",
        price=22000,
        images=[IMG_C],
        badges=["To-let", "Verified", "Residential"],
        bedrooms=3,
        bathrooms=2,
        area=1200,
        parking=1,
    ),
    _p(
        id="mock-res-mirpur-02",
        title="Budget Friendly 2BR Mirpur 11",
        address="Section 11, Mirpur, Dhaka",
        price=16000,
        images=[IMG_B],
        badges=["To-let", "Verified", "Residential"],
        bedrooms=2,
        bathrooms=1,
        area=900,
        parking=0,
    ),
    # Bashundhara
    _p(
        id="mock-res-bashundhara-01",
        title="Modern Apartment Bashundhara R/A",
        address="Block G, Road 5, Bashundhara R/A, Dhaka",
        price=48000,
        images=[IMG_A],
        badges=["To-let", "Verified", "Residential", "Semi-Furnished"],
        bedrooms=3,
        bathrooms=3,
        area=1700,
        parking=2,
    ),
    _p(
        id="mock-res-bashundhara-02",
        title="Luxury Villa Bashundhara",
        address="Block D, Bashundhara R/A, Dhaka",
        price=25000000,
        images=[IMG_D],
        badges=["For Sale", "Verified", "Residential", "Luxury"],
        bedrooms=6,
        bathrooms=6,
        area=4500,
        parking=4,
    ),
    # Mohammadpur
    _p(
        id="mock-res-mohammadpur-01",
        title="Comfortable Flat Mohammadpur",
        address="Nobodoy Housing, Mohammadpur, Dhaka",
        price=20000,
        images=[IMG_C],
        badges=["To-let", "Verified", "Residential"],
        bedrooms=2,
        bathrooms=2,
        area=1000,
        parking=1,
    ),
    # Baridhara / Nikunja
    _p(
        id="mock-res-baridhara-01",
        title="Diplomatic Zone Apartment Baridhara",
        address="Road 4, Baridhara, Dhaka",
        price=110000,
        images=[IMG_A],
        badges=["To-let", "Verified", "Residential", "Fully Furnished", "Luxury"],
        build_year=2021,
        bedrooms=4,
        bathrooms=4,
        area=2800,
        parking=3,
    ),
    _p(
        id="mock-res-nikunja-01",
        title="Family Flat Near Airport Nikunja 2",
        address="Road 10, Nikunja 2, Khilkhet, Dhaka",
        price=6500000,
        images=[IMG_B],
        badges=["For Sale", "Verified", "Residential"],
        build_year=2017,
        bedrooms=3,
        bathrooms=2,
        area=1350,
        parking=1,
    ),
    # Hostels / shared
    _p(
        id="mock-hostel-01",
        title="Student Hostel Near NSU Bashundhara",
        address="Near NSU, Bashundhara, Dhaka",
        price=8000,
        images=[IMG_B],
        badges=["To-let", "Verified", "Hostel", "Shared"],
        bedrooms=1,
        bathrooms=1,
        area=250,
        parking=0,
    ),
    _p(
        id="mock-hostel-02",
        title="Working Professional Hostel Uttara",
        address="Sector 9, Uttara, Dhaka",
        price=12000,
        images=[IMG_C],
        badges=["To-let", "Verified", "Hostel", "Furnished"],
        bedrooms=1,
        bathrooms=1,
        area=350,
        parking=0,
    ),
    # Short term rentals
    _p(
        id="mock-str-01",
        title="Service Apartment Banani (Daily/Monthly)",
        address="Road 17, Banani, Dhaka",
        price=3500,
        images=[IMG_A],
        badges=["To-let", "Verified", "Short Term Rental", "Fully Furnished"],
        bedrooms=1,
        bathrooms=1,
        area=550,
        parking=0,
    ),
    _p(
        id="mock-str-02",
        title="Serviced Studio Gulshan 2",
        address="Road 86, Gulshan 2, Dhaka",
        price=4500,
        images=[IMG_D],
        badges=["To-let", "Verified", "Short Term Rental", "Luxury"],
        bedrooms=1,
        bathrooms=1,
        area=600,
        parking=1,
    ),
)

MOCK_CITIES: tuple[str, ...] = ("Dhaka", "Chittagong", "Sylhet", "Khulna", "Rajshahi")

MOCK_NEIGHBORHOODS: dict[str, tuple[str, ...]] = {
    "dhaka": ("Gulshan", "Banani", "Uttara", "Dhanmondi", "Bashundhara", "Mirpur"),
    "chittagong": ("Agrabad", "Nasirabad", "Pahartali"),
    "sylhet": ("Zinda Bazar", "Amberkhana", "Mirabazar"),
    "khulna": ("Sonadanga", "Khalishpur", "Mujgunni"),
    "rajshahi": ("Uttara", "Boalia", "Rajpara"),
}
DEFAULT_NEIGHBORHOODS: tuple[str, ...] = ("Central", "North", "South")

# (id, label, is_required)
MOCK_REQUIRED_DOCUMENTS: tuple[tuple[str, str, bool], ...] = (
    ("923dad", "NID", True),
    ("23243fasf", "Employment letter", True),
    ("da5da", "Bank Statement", False),
    ("da67g5da", "Solvency Certificate", False),
)
