# Copyright (c) 2009-2010 Six Apart Ltd.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of Six Apart Ltd. nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""

How service operations report their outcome.

Every operation takes up to three optional callbacks as keyword arguments:

* ``load``, called with the result when the operation succeeds
* ``error``, called with the exception describing the failure when it fails
* ``handle``, called after either of those, with the same argument

Failures of an operation's preconditions (a missing id, an argument of the
wrong type) are reported the same way as failed requests, with a
`ServiceError` as the argument.

"""

import logging


log = logging.getLogger('sbtconnections.callbacks')


class ServiceError(Exception):

    """An exception describing an operation that was not attempted because
    its arguments were unusable.

    `code` is an HTTP-like status code for the kind of failure and `message`
    a description of it.

    """

    def __init__(self, code, message):
        super(ServiceError, self).__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self):
        return '%s: %s' % (self.code, self.message)


class Callbacks(object):

    def __init__(self, load=None, error=None, handle=None):
        self.load = load
        self.error = error
        self.handle = handle

    def __bool__(self):
        return any(cb is not None for cb in (self.load, self.error, self.handle))

    def loaded(self, *result):
        """Reports success. Operations with no result pass no arguments."""
        if self.load is not None:
            self.load(*result)
        if self.handle is not None:
            self.handle(*result)

    def failed(self, exc):
        """Reports failure with the exception `exc`.

        If no callbacks were given at all, the failure is logged instead.

        """
        if not self:
            log.error('%s', exc)
            return
        if self.error is not None:
            self.error(exc)
        if self.handle is not None:
            self.handle(exc)
