"""Web-сервис зоны: health для балансировщика и баннер deployment-bar.js."""
