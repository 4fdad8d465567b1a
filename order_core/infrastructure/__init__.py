"""Infrastructure layer - collaborator implementations for the Order core."""
