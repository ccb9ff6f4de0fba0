from nmigen import Record

class Request(Record):
    def __init__(self, width, name):
        super().__init__([
            ('a',           width),
            ('b',           width),
            ('op',              3),
            ('valid',           1),
        ], name=name)

    def connect(lhs, rhs):
        """
        example: m.d.comb += mdu.request.connect(ex.mdu_request)
        """
        return [
            lhs.a           .eq(rhs.a),
            lhs.b           .eq(rhs.b),
            lhs.op          .eq(rhs.op),
            lhs.valid       .eq(rhs.valid),
        ]

class Response(Record):
    def __init__(self, width, name):
        super().__init__([
            ('ready',           1),
            ('result',      width),
            ('busy',            1),
        ], name=name)

    def connect(lhs, rhs):
        """
        example: m.d.comb += wb.mdu_response.connect(mdu.response)
        """
        return [
            lhs.ready       .eq(rhs.ready),
            lhs.result      .eq(rhs.result),
            lhs.busy        .eq(rhs.busy),
        ]
