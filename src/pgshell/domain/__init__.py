"""Domain layer - statements, result sets and errors of the console."""
