from quantifier_repro.orm.service.reproduction import QueryOutcome, ReproductionReport, ReproductionService

__all__ = ["QueryOutcome", "ReproductionReport", "ReproductionService"]
