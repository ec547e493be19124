import matplotlib

# file output only; no display in test runs
matplotlib.use('Agg')
