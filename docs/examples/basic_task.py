"""Print a greeting every five seconds until interrupted.

Run with::

    SCHEDULER_LOG_JSON=false python docs/examples/basic_task.py
"""
from mp_scheduler import Job, Scheduler, TimeSpan
from mp_scheduler.config import DotenvSettingsLoader, SchedulerSettings
from mp_scheduler.observability import JsonLoggerFactory


def main() -> None:
    settings = DotenvSettingsLoader().load(SchedulerSettings)
    JsonLoggerFactory.configure_from_settings(settings)

    scheduler = Scheduler(settings=settings)
    scheduler.add_job(Job.every(5, TimeSpan.SECONDS).named("hello").do(lambda: print("Hello World")))
    try:
        scheduler.run_forever()
    except KeyboardInterrupt:
        scheduler.stop()


if __name__ == "__main__":
    main()
