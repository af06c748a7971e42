"""Infrastructure layer: AST parsing and structural primitives."""
