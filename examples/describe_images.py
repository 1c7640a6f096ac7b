"""Describe two images with a Vertex AI Gemini model.

Reads ``frog.png`` from the current directory, references a public Cloud
Storage image, and prints the model's answer wrapped to 79 columns. Set
GCP_PROJECT (or GCLOUD_PROJECT) and optionally GCP_LOCATION first.
"""

import logging
import textwrap

from multimodal import MultiModal

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

# "gemini-1.5-pro" also works, if only text is sent
mm = MultiModal("gemini-1.0-pro-vision", 0.4)

mm.must_add_image("frog.png")
mm.add_uri("gs://generativeai-downloads/images/scones.jpg")
mm.add_text("Describe what is common for these two images.")

token_count = mm.count_tokens()
print(f"Sending {token_count} tokens.\n")

response = mm.submit()
print(textwrap.fill(response, width=79))
