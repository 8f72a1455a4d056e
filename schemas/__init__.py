"""
Ziplan Schemas
Pydantic request and response models
"""
