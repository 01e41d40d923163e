"""Domain logic, free of concrete adapter imports."""
