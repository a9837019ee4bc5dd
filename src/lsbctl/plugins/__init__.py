"""Service-manager backends loaded through pluggy."""
