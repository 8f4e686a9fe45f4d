"""Metric groups, scopes, the gauge registry and the reporter that collects them."""