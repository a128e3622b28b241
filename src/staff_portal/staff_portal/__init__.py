"""Staff Portal package.

This package is organized by feature modules (schedules, timezones, ...)
with a thin Flask controller layer and service/repository layers.
The schedules module renders the weekly shift grid in facility time or
remote-staff time.
"""
