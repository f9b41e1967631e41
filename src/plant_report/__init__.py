"""Daily plant operations report: layout planning and raster rendering."""
