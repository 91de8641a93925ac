"""
Booklist Backend - Pydantic Schemas
====================================

    - resources.py: field declarations per resource type
    - common.py:    error and health response models
"""
