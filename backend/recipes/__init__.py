"""
Recipe collection.

Responsibilities:
- Define the recipe record and the form shape used to create or edit one.
- Convert delimited form text into ingredient, instruction and tag lists.
- Hold the in-memory recipe collection and its create/update/delete operations.
- Filter a recipe collection by text query, cuisine, status and prep time.
"""
