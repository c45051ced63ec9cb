"""
Recipe generator (Recipe Studio)

Generation picks one template from a static catalog by scoring the user's
prompt against per-template keywords, then customizes a copy of it:
  - catalog.py     built-in templates, cuisine affinity, category fallback
  - matcher.py     scoring, selection and customization
  - validation.py  request checks done by callers before matching
  - service.py     preview / save / notify around the matcher
"""
