"""Host metadata payload types, gohai inventory and host tags from resource attributes."""