import numpy as np


class Metrics:
    def __init__(self):
        self.data = {
            "distance": [],
            "hops": [],
            "found": []
        }

    def log(self, distance, hops, found):
        self.data["distance"].append(distance)
        self.data["hops"].append(hops)
        self.data["found"].append(1.0 if found else 0.0)

    def summary(self):
        # distance/hops only average over queries that found a route
        reached = [i for i, f in enumerate(self.data["found"]) if f]
        dist = [self.data["distance"][i] for i in reached]
        hops = [self.data["hops"][i] for i in reached]
        found = self.data["found"]
        return {
            "queries": len(found),
            "found_ratio": float(np.mean(found)) if found else 0.0,
            "avg_distance": float(np.mean(dist)) if dist else 0.0,
            "max_distance": float(np.max(dist)) if dist else 0.0,
            "avg_hops": float(np.mean(hops)) if hops else 0.0,
        }
