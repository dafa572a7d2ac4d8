"""
Couche domaine (core).

Contient les ports (interfaces abstraites), les objets valeur et la
taxonomie des erreurs. Cette couche n'a AUCUNE dependance vers httpx.

Sous-packages :
- ports/ : Contrats du transport HTTP et des serialiseurs
- value_objects/ : Objets valeur immutables (ActionRequest, StreamLocator)
- errors : Hierarchie des exceptions XtreamError
"""
