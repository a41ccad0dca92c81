"""HTTP-приложение и его маршруты."""
