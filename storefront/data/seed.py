# storefront/data/seed.py
from storefront.data.database import SessionLocal

_IMG = "https://images.unsplash.com/photo-{}?w=800&q=80"

INITIAL_CATALOG = [
    {
        "id": "prod-1",
        "name": "Quantum Processor XR-9",
        "description": "Next-generation neural processing unit with quantum computing capabilities",
        "price": "1299.99",
        "image": _IMG.format("1591799264318-7e6ef8ddb7ea"),
        "category": "Computing",
    },
    {
        "id": "prod-2",
        "name": "HoloLens Pro Vision",
        "description": "Augmented reality glasses with holographic display technology",
        "price": "899.99",
        "image": _IMG.format("1617802690992-15d93263d3a9"),
        "category": "Wearables",
    },
    {
        "id": "prod-3",
        "name": "NanoBot Health Monitor",
        "description": "Advanced biometric tracking device with AI health analysis",
        "price": "499.99",
        "image": _IMG.format("1576091160399-112ba8d25d1d"),
        "category": "Health",
    },
    {
        "id": "prod-4",
        "name": "Plasma Energy Core",
        "description": "Wireless charging station with plasma energy conversion",
        "price": "349.99",
        "image": _IMG.format("1609091839311-d5365f9ff1c5"),
        "category": "Accessories",
    },
    {
        "id": "prod-5",
        "name": "Neural Interface Band",
        "description": "Mind-controlled device interface with EEG sensors",
        "price": "799.99",
        "image": _IMG.format("1605170439002-90845e8c0137"),
        "category": "Wearables",
    },
    {
        "id": "prod-6",
        "name": "Gravity Levitation Speaker",
        "description": "Floating wireless speaker with magnetic levitation technology",
        "price": "599.99",
        "image": _IMG.format("1608043152269-423dbba4e7e1"),
        "category": "Audio",
    },
    {
        "id": "prod-7",
        "name": "CyberKey Security Module",
        "description": "Quantum encryption key with biometric authentication",
        "price": "249.99",
        "image": _IMG.format("1558618666-fcd25c85cd64"),
        "category": "Security",
    },
    {
        "id": "prod-8",
        "name": "Photon Keyboard Elite",
        "description": "Mechanical keyboard with holographic key projections",
        "price": "399.99",
        "image": _IMG.format("1587829741301-dc798b83add3"),
        "category": "Computing",
    },
    {
        "id": "prod-9",
        "name": "AI Companion Drone",
        "description": "Personal assistant drone with advanced AI capabilities",
        "price": "1499.99",
        "image": _IMG.format("1473968512647-3e447244af8f"),
        "category": "Robotics",
    },
    {
        "id": "prod-10",
        "name": "Smart Glass Display",
        "description": "Transparent OLED display with touch interface",
        "price": "2199.99",
        "image": _IMG.format("1593640408182-31c70c8268f5"),
        "category": "Display",
    },
]


def seed() -> int:
    # only seeds when the products table is empty
    from storefront.services.catalog_service import CatalogService

    db = SessionLocal()
    try:
        return CatalogService(db).seed_if_empty()
    finally:
        db.close()
