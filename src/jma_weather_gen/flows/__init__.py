"""
Prefect flows for the calendar pipeline.

Flows:
- generate: fetch each configured city's forecast, aggregate it per day,
  render an iCalendar document and write ``<output_dir>/<city>.ics``

Usage (local):
    python -m jma_weather_gen.flows.generate

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m jma_weather_gen.flows.generate
"""
