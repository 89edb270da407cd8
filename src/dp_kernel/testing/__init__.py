"""Testing utilities – Hypothesis strategies (``pip install "dp-kernel[testing]"``)."""
