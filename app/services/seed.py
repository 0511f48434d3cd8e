"""
Demo furniture catalog used for local runs and the seed script.
"""

import structlog

from app.services.product_service import ProductService

logger = structlog.get_logger(__name__)

IMAGE_BASE = "https://images.example.com/catalog"

DEMO_PRODUCTS: list[dict] = [
    {
        "name": "Sofá Retrátil Lisboa",
        "description": "Sofá retrátil e reclinável de três lugares com tecido suede.",
        "mainImage": f"{IMAGE_BASE}/sofa-lisboa.jpg",
        "images": [f"{IMAGE_BASE}/sofa-lisboa-2.jpg", f"{IMAGE_BASE}/sofa-lisboa-3.jpg"],
        "price": 3299.9,
        "category": "sala de estar",
        "shortDescription": "Sofá 3 lugares retrátil",
        "dimensions": "230 x 105 x 98 cm",
        "featured": True,
        "onSale": True,
    },
    {
        "name": "Rack Madeira Maciça Oslo",
        "description": "Rack em madeira de demolição para TVs de até 65 polegadas.",
        "mainImage": f"{IMAGE_BASE}/rack-oslo.jpg",
        "price": 1890.0,
        "category": "sala de estar",
        "shortDescription": "Rack para TV até 65\"",
        "dimensions": "180 x 45 x 55 cm",
    },
    {
        "name": "Cama Casal Aurora",
        "description": "Cama casal com cabeceira estofada e estrado reforçado.",
        "mainImage": f"{IMAGE_BASE}/cama-aurora.jpg",
        "price": 2450.0,
        "category": "quarto",
        "shortDescription": "Cama casal com cabeceira estofada",
        "dimensions": "158 x 208 x 120 cm",
        "featured": True,
    },
    {
        "name": "Guarda-Roupa Sob Medida",
        "description": "Projeto sob medida com portas de correr e espelho.",
        "mainImage": f"{IMAGE_BASE}/guarda-roupa.jpg",
        "price": None,
        "category": "quarto",
        "shortDescription": "Preço sob consulta",
        "dimensions": None,
    },
    {
        "name": "Mesa de Jantar Toscana",
        "description": "Mesa de jantar em carvalho para seis lugares.",
        "mainImage": f"{IMAGE_BASE}/mesa-toscana.jpg",
        "price": 2780.0,
        "category": "cozinha",
        "shortDescription": "Mesa 6 lugares em carvalho",
        "dimensions": "180 x 90 x 76 cm",
        "onSale": True,
    },
    {
        "name": "Banqueta Alta Bistrô",
        "description": None,
        "mainImage": f"{IMAGE_BASE}/banqueta-bistro.jpg",
        "price": 349.9,
        "category": "cozinha",
        "shortDescription": None,
        "dimensions": "40 x 40 x 75 cm",
        "available": False,
    },
    {
        "name": "Escrivaninha Nórdica",
        "description": "Escrivaninha com gaveta e pés palito em madeira clara.",
        "mainImage": f"{IMAGE_BASE}/escrivaninha-nordica.jpg",
        "price": 899.0,
        "category": "escritório",
        "shortDescription": "Escrivaninha com gaveta",
        "dimensions": "120 x 60 x 75 cm",
        "featured": True,
    },
    {
        "name": "Cadeira Ergonômica Pro",
        "description": "Cadeira com apoio lombar ajustável e braços 3D.",
        "mainImage": f"{IMAGE_BASE}/cadeira-pro.jpg",
        "price": 1590.0,
        "category": "escritório",
        "shortDescription": "Cadeira ergonômica",
        "dimensions": "65 x 65 x 120 cm",
    },
    {
        "name": "Gabinete Suspenso Marés",
        "description": "Gabinete para banheiro com cuba de apoio e duas portas.",
        "mainImage": f"{IMAGE_BASE}/gabinete-mares.jpg",
        "price": 720.0,
        "category": "banheiro",
        "shortDescription": "Gabinete com cuba",
        "dimensions": "80 x 45 x 50 cm",
    },
    {
        "name": "Espreguiçadeira Praia",
        "description": "Espreguiçadeira em alumínio e corda náutica.",
        "mainImage": f"{IMAGE_BASE}/espreguicadeira-praia.jpg",
        "price": None,
        "category": "área externa",
        "shortDescription": "Espreguiçadeira para piscina",
        "dimensions": "190 x 70 x 35 cm",
        "featured": True,
    },
]


def seed_catalog(service: ProductService) -> int:
    """Create every demo product through the service. Returns how many were created."""
    for payload in DEMO_PRODUCTS:
        service.create_product(payload)
    logger.info("Demo catalog loaded", products=len(DEMO_PRODUCTS))
    return len(DEMO_PRODUCTS)
