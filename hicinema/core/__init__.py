"""
Couche domaine (core).

Contient les entités métier, les ports (interfaces abstraites) et le type Result.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, BDD).

Sous-packages :
- entities/ : Entités métier (Movie, Genre, MovieCategory, PagingInfo)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- result.py : Union étiquetée Success / Error / NoMoreData
"""
