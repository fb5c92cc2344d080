"""Route Modules - one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes hold no business logic beyond order-key mapping and response shaping
"""
