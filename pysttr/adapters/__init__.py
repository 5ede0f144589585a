"""Front-end adapters: menu engines and the terminal editor."""
