"""
Storage‑side data shapes.

Records defined here are what the store keeps and hands back.  They are
independent of the Pydantic request and response schemas in
``schemas`` so that the API representation can evolve separately.
"""
