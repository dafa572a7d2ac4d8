"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes:
- api/ : URLs, transport httpx et dispatcher des requetes
- serializers/ : Serialiseurs de reference (CamelCase, Standardized, JSON:API)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
