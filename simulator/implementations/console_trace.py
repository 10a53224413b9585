import sys

from ..interfaces.trace_sink import ITraceSink, TraceRecord


class ConsoleTrace(ITraceSink):
    """
    Prints the step table, one tab-separated line per record:

        TIME  STATE  FLOOR  D1  D2  D3  step  action
    """

    HEADER = "TIME\tSTATE\tFLOOR\tD1\tD2\tD3\tstep\taction"

    def __init__(self, stream=None, header: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self._header_pending = header

    def record(self, record: TraceRecord):
        if self._header_pending:
            print(self.HEADER, file=self.stream)
            self._header_pending = False
        print(self.format(record), file=self.stream)

    @staticmethod
    def format(record: TraceRecord) -> str:
        flags = ["X" if flag else "0" for flag in (record.d1, record.d2, record.d3)]
        return "\t".join([f"{record.time:04d}", record.direction, str(record.floor), *flags,
                          record.step, record.text])
