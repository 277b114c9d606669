"""Field validation, entity generators and the galaxy chart."""
