"""
Seed data applied once per deployment by seed_data.py
"""

DEFAULT_CATEGORIES = [
    {
        "name": "Tecnología",
        "slug": "tecnologia",
        "description": "Recursos sobre las últimas tendencias tecnológicas, innovaciones y su impacto en la sociedad actual.",
        "icon": "RocketIcon"
    },
    {
        "name": "Informática",
        "slug": "informatica",
        "description": "Fundamentos de programación, desarrollo de software, bases de datos y sistemas informáticos.",
        "icon": "LaptopIcon"
    },
    {
        "name": "Mercadeo",
        "slug": "mercadeo",
        "description": "Estrategias de marketing, comportamiento del consumidor, investigación de mercados y marketing digital.",
        "icon": "TrendingUpIcon"
    },
    {
        "name": "Legislación Laboral",
        "slug": "legislacion-laboral",
        "description": "Derechos y obligaciones laborales, contratos de trabajo, seguridad social y normativa laboral vigente.",
        "icon": "FileTextIcon"
    },
    {
        "name": "Legislación Comercial",
        "slug": "legislacion-comercial",
        "description": "Derecho mercantil, sociedades comerciales, contratos y regulación de las actividades comerciales.",
        "icon": "ScalesIcon"
    },
    {
        "name": "Administración",
        "slug": "administracion",
        "description": "Gestión empresarial, planificación estratégica, administración de recursos humanos y liderazgo organizacional.",
        "icon": "ClipboardListIcon"
    },
]
