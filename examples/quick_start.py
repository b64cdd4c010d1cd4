"""Quick Start Example

This example demonstrates basic usage with a synthetic RR-interval series.
"""

import logging

import numpy as np
from classa import ClassAEntropy, MultiscaleClassA, classify

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

# Synthetic RR intervals (seconds): respiratory sinus arrhythmia plus noise
rng = np.random.default_rng(42)
t = np.arange(1000)
rr = 0.8 + 0.04 * np.sin(2 * np.pi * t / 14.0) + 0.015 * rng.standard_normal(len(t))

logger.info("ClassA Quick Start\n")

logger.info("Single scale")
stats, entropy, probabilities, angles = classify(rr, k=4, symbolization="equal")
logger.info("RAS: %.2f deg, P1: %.3f, P24: %.3f, P3: %.3f", *stats)
logger.info("Normalized entropy: %.4f\n", entropy)

logger.info("Symbolization strategies")
for strategy in ["equal", "kmeans", "ncdf", "sigmoid", "gaussian", "arctanh"]:
    result = classify(rr, k=6, symbolization=strategy)
    logger.info("%-9s entropy = %.4f", strategy, result.entropy)

logger.info("\nMultiscale signature")
ms = MultiscaleClassA(scales=[1, 2, 3, 4, 5], k=4)
signature = ms.fit_transform(rr)
for scale, h in zip(ms.scales, signature['entropy']):
    logger.info("scale %d: entropy = %.4f", scale, h)

logger.info("\nPhase-space plot")
est = ClassAEntropy(phase=2, k=4).fit(rr)
fig, ax = est.plot()
fig.savefig("classa_phase_space.png", bbox_inches='tight')
logger.info("Saved classa_phase_space.png")
