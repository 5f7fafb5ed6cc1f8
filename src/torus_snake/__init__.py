"""Snake on a wrap-around grid: clock, game rules, controls and frame projection."""
