"""Infrastructure layer: filesystem access for layout discovery."""
