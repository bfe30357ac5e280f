"""Built-in catalog of service intents used for search suggestions.

The phrases are real-world job requests in natural Spanish, grouped by
category.  Order matters: entries with equal scores are returned in the
order they are declared here.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from .models import SuggestionCatalog

DEFAULT_ENTRIES: Tuple[Tuple[str, str], ...] = (
    # Fontanería
    ("Destapar mi baño", "fontaneria"),
    ("Destapar tubería", "fontaneria"),
    ("Destapar coladera", "fontaneria"),
    ("Destapar drenaje", "fontaneria"),
    ("Destapar WC", "fontaneria"),
    ("Reparar fuga de agua", "fontaneria"),
    ("Fuga en lavabo", "fontaneria"),
    ("Fuga en regadera", "fontaneria"),
    ("Fuga en tubería", "fontaneria"),
    ("Instalar boiler", "fontaneria"),
    ("Instalar calentador de agua", "fontaneria"),
    ("Instalar tinaco", "fontaneria"),
    ("Lavar tinaco", "fontaneria"),
    ("Reparar llave de agua", "fontaneria"),
    ("Cambiar llave mezcladora", "fontaneria"),
    ("Instalar bomba de agua", "fontaneria"),
    ("No tengo agua caliente", "fontaneria"),
    ("Poca presión de agua", "fontaneria"),
    ("Goteo en llave", "fontaneria"),
    ("Reparar WC", "fontaneria"),
    # Electricidad
    ("Instalar apagador", "electricidad"),
    ("Instalar contacto eléctrico", "electricidad"),
    ("Instalar lámpara", "electricidad"),
    ("Instalar ventilador de techo", "electricidad"),
    ("Instalar foco", "electricidad"),
    ("Reparar corto circuito", "electricidad"),
    ("No tengo luz", "electricidad"),
    ("Falla eléctrica", "electricidad"),
    ("Revisar tablero eléctrico", "electricidad"),
    ("Cambiar fusibles", "electricidad"),
    ("Cambiar breaker", "electricidad"),
    ("Enchufe no funciona", "electricidad"),
    ("Luz que parpadea", "electricidad"),
    ("Instalar timbre", "electricidad"),
    ("Cableado eléctrico", "electricidad"),
    # Jardinería
    ("Cortar el pasto", "jardineria"),
    ("Cortar árbol", "jardineria"),
    ("Podar árboles", "jardineria"),
    ("Podar arbustos", "jardineria"),
    ("Quitar un árbol", "jardineria"),
    ("Diseño de jardín", "jardineria"),
    ("Instalar sistema de riego", "jardineria"),
    ("Mantenimiento de jardín", "jardineria"),
    ("Plantar árboles", "jardineria"),
    ("Limpiar jardín", "jardineria"),
    ("Fumigar jardín", "jardineria"),
    ("Cortar césped", "jardineria"),
    ("Desmalezar terreno", "jardineria"),
    # Limpieza
    ("Limpieza de casa", "limpieza"),
    ("Limpieza profunda", "limpieza"),
    ("Limpieza de oficina", "limpieza"),
    ("Limpieza de alfombra", "limpieza"),
    ("Limpieza de vidrios", "limpieza"),
    ("Limpieza de cocina", "limpieza"),
    ("Limpieza de baño", "limpieza"),
    ("Limpieza después de obra", "limpieza"),
    ("Lavado de alfombra", "limpieza"),
    ("Lavado de colchón", "limpieza"),
    ("Lavado de muebles", "limpieza"),
    ("Lavado de cortinas", "limpieza"),
    ("Limpiar cochera", "limpieza"),
    ("Quitar basura", "limpieza"),
    ("Retiro de basura", "limpieza"),
    ("Llevarse basura", "limpieza"),
    ("Sacar basura", "limpieza"),
    ("Sacar escombro", "limpieza"),
    ("Retiro de escombro", "limpieza"),
    ("Sacar plantas", "limpieza"),
    ("Sacar llantas", "limpieza"),
    ("Sacar chatarra", "limpieza"),
    ("Retiro de chatarra", "limpieza"),
    # Handyman
    ("Colgar una TV", "handyman"),
    ("Colgar cuadros", "handyman"),
    ("Colgar repisas", "handyman"),
    ("Colgar espejo", "handyman"),
    ("Colgar cortinas", "handyman"),
    ("Instalar persianas", "handyman"),
    ("Armar muebles", "handyman"),
    ("Armar muebles de IKEA", "handyman"),
    ("Armar cama", "handyman"),
    ("Armar escritorio", "handyman"),
    ("Armar librero", "handyman"),
    ("Reparar puerta", "handyman"),
    ("Reparar ventana", "handyman"),
    ("Cambiar cerradura", "handyman"),
    ("Reparar bisagra", "handyman"),
    ("Reparar manija", "handyman"),
    ("Instalar chapa", "handyman"),
    ("Sellar ventana", "handyman"),
    ("Mover muebles", "handyman"),
    ("Arreglos menores", "handyman"),
    # Pintura
    ("Pintar pared", "pintura"),
    ("Pintar cuarto", "pintura"),
    ("Pintar recámara", "pintura"),
    ("Pintar sala", "pintura"),
    ("Pintar casa completa", "pintura"),
    ("Pintar fachada", "pintura"),
    ("Pintar exterior", "pintura"),
    ("Pintar interior", "pintura"),
    ("Retoques de pintura", "pintura"),
    ("Barnizar madera", "pintura"),
    ("Impermeabilizar techo", "pintura"),
    ("Pintar herrería", "pintura"),
    # Carpintería
    ("Reparar mueble de madera", "carpinteria"),
    ("Hacer closet a medida", "carpinteria"),
    ("Instalar piso laminado", "carpinteria"),
    ("Reparar piso de madera", "carpinteria"),
    ("Hacer puerta de madera", "carpinteria"),
    ("Reparar cajón", "carpinteria"),
    ("Hacer estante a medida", "carpinteria"),
    ("Instalar zoclo", "carpinteria"),
    # Mudanza
    ("Mudanza completa", "mudanza"),
    ("Mover refrigerador", "mudanza"),
    ("Mover lavadora", "mudanza"),
    ("Empacar para mudanza", "mudanza"),
    ("Acarreo de muebles", "mudanza"),
    # HVAC / Ventilación
    ("Instalar aire acondicionado", "hvac"),
    ("Reparar aire acondicionado", "hvac"),
    ("Mantenimiento de minisplit", "hvac"),
    ("Limpiar minisplit", "hvac"),
    ("Instalar ventilador", "hvac"),
    # Electrodomésticos
    ("Arreglar mi lavadora", "electrodomesticos"),
    ("Reparar lavadora", "electrodomesticos"),
    ("Reparar refrigerador", "electrodomesticos"),
    ("Reparar estufa", "electrodomesticos"),
    ("Reparar microondas", "electrodomesticos"),
    ("Reparar secadora", "electrodomesticos"),
    ("Instalar lavadora", "electrodomesticos"),
    ("Instalar secadora", "electrodomesticos"),
    # Auto y lavado
    ("Lavar mi carro", "auto"),
    ("Lavado de auto completo", "auto"),
    ("Lavado interior de auto", "auto"),
    ("Lavado exterior de auto", "auto"),
    ("Aspirado de auto", "auto"),
    ("Encerado de auto", "auto"),
    ("Pulido de auto", "auto"),
    ("Detallado automotriz", "auto"),
    ("Cambiar batería de carro", "auto"),
    ("Cambiar llanta", "auto"),
)

# High-conversion phrases shown when a query matches (almost) nothing.
GENERIC_FALLBACKS: Tuple[str, ...] = (
    "Reparación del hogar",
    "Limpieza de casa",
    "Instalar algo en mi casa",
    "Arreglo urgente",
    "Servicio de plomería",
)


@lru_cache(maxsize=1)
def default_catalog() -> SuggestionCatalog:
    """Return the built-in catalog (built once per process)."""

    return SuggestionCatalog.from_pairs(DEFAULT_ENTRIES, GENERIC_FALLBACKS)
