"""AutoImplant Guide: implant placement planning service."""
