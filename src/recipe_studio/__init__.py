"""
Recipe Studio

Backend pieces of a recipe-management app:
  - generator      keyword-scored template matcher ("AI" recipe generation)
  - recipes        record types and the Supabase recipes store
  - notifications  team activity notifications via a Supabase edge function
  - shopping       shopping lists built from recipe ingredients
  - search         search and facet filters
  - analytics      dashboard statistics
"""
