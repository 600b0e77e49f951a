import os
from fingerrunner.config import Config
from fingerrunner.sprites import generate_placeholder_sprites

if not os.path.exists(Config.ASSETS_DIR):
    os.makedirs(Config.ASSETS_DIR)

written = generate_placeholder_sprites(Config.ASSETS_DIR)
if written:
    print(f"Wrote {len(written)} placeholder sprites to {Config.ASSETS_DIR}/")
else:
    print("Sprites already exist.")
