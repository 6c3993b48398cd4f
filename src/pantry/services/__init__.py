"""Pure engine services: substitution, matching, pairing and shopping lists."""
