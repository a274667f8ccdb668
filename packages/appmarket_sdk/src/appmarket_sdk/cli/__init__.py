"""AppMarket SDK command-line tools."""
