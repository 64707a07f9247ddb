import os

from hypothesis import settings

settings.register_profile("fast", max_examples=50)
if os.environ.get("HYPO_SLOW") != "1":
    settings.load_profile("fast")
